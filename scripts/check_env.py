"""Check that the LinkedIn OAuth configuration is usable before starting the server.

The server itself only warns when ``LINKEDIN_CLIENT_ID`` is missing, which
leaves login silently disabled. This tool is stricter:

1. It loads ``AppSettings`` from the given ``.env`` file and fails when a value
   is malformed (for example a non-numeric ``PORT``) or when the client id or
   client secret is absent.
2. It can record and later verify a SHA256 checksum of the ``.env`` file so
   unexpected edits to the credentials are noticed.

Example usages::

    python -m scripts.check_env check --env-file .env

    python -m scripts.check_env record --env-file .env --hash-file .env.sha256
    python -m scripts.check_env verify --env-file .env --hash-file .env.sha256
"""

from __future__ import annotations

import argparse
import hashlib
import sys
from pathlib import Path

from pydantic import ValidationError

from app.core.config import AppSettings, _load_env_file

EXIT_OK = 0
EXIT_VALIDATION_ERROR = 2
EXIT_CHECKSUM_ERROR = 3
EXIT_RUNTIME_ERROR = 5


class MissingCredentialsError(Exception):
    """Raised when the LinkedIn client id or secret is not configured."""


def _checksum(env_file: Path) -> str:
    return hashlib.sha256(env_file.read_bytes()).hexdigest()


def _load_settings(env_file: Path) -> AppSettings:
    """Load settings from ``env_file`` and insist on complete credentials."""
    if not env_file.exists():
        raise FileNotFoundError(f"Environment file {env_file} does not exist.")
    _load_env_file(str(env_file))
    settings = AppSettings()
    missing = [
        name
        for name, value in (
            ("LINKEDIN_CLIENT_ID", settings.linkedin.client_id),
            ("LINKEDIN_CLIENT_SECRET", settings.linkedin.client_secret),
        )
        if not value
    ]
    if missing:
        raise MissingCredentialsError(", ".join(missing))
    return settings


def _record(env_file: Path, hash_file: Path) -> int:
    checksum = _checksum(env_file)
    hash_file.write_text(f"{checksum}\n", encoding="utf-8")
    print(f"Recorded checksum to {hash_file} ({checksum})")
    return EXIT_OK


def _verify(env_file: Path, hash_file: Path) -> int:
    if not hash_file.exists():
        print(
            f"Checksum file {hash_file} is missing; run 'record' first.",
            file=sys.stderr,
        )
        return EXIT_RUNTIME_ERROR

    expected = hash_file.read_text(encoding="utf-8").strip()
    actual = _checksum(env_file)
    if expected != actual:
        print(
            "Environment checksum mismatch!\n"
            f"  expected: {expected}\n"
            f"  actual:   {actual}",
            file=sys.stderr,
        )
        return EXIT_CHECKSUM_ERROR
    print("Environment checksum OK.")
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate LinkedIn OAuth settings and detect .env drift."
    )
    parser.add_argument(
        "command",
        choices=("check", "record", "verify"),
        help="check: validate only; record/verify: also manage the checksum baseline.",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        type=Path,
        help="Path to the environment file (default: ./.env).",
    )
    parser.add_argument(
        "--hash-file",
        type=Path,
        help="Checksum baseline location, required for record and verify.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command != "check" and args.hash_file is None:
        parser.error(f"--hash-file is required for '{args.command}'")

    env_file: Path = args.env_file
    try:
        settings = _load_settings(env_file)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except ValidationError as exc:
        print(
            "Settings validation failed:\n" f"{exc.json(indent=2)}",
            file=sys.stderr,
        )
        return EXIT_VALIDATION_ERROR
    except MissingCredentialsError as exc:
        print(f"Missing LinkedIn credentials: {exc}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    print(
        f"Settings OK (redirect URI {settings.linkedin.redirect_uri}, "
        f"port {settings.port})."
    )
    if args.command == "record":
        return _record(env_file, args.hash_file)
    if args.command == "verify":
        return _verify(env_file, args.hash_file)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
