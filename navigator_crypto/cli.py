"""
Command-line front end.

    navigator-crypto encrypt TEXT
    navigator-crypto decrypt TEXT
    navigator-crypto pwgen [LENGTH]
    navigator-crypto version
"""
import sys
import logging
import argparse
from typing import Optional, Sequence

from pydantic import ValidationError

from .conf import CryptoConfig
from .exceptions import CryptoError
from .handler import CryptoHandler
from .keystore import SecretKeyStore
from .passwords import PasswordGenerator
from .version import __title__, __version__

logger = logging.getLogger("navigator.crypto")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="navigator-crypto",
        description="Encrypt and decrypt {AES256} values with the application secret key.",
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("version", help="Show application version")
    enc = sub.add_parser("encrypt", help="encrypt clear text for passwords")
    enc.add_argument("text", help="clear text")
    dec = sub.add_parser("decrypt", help="decrypt encrypted text")
    dec.add_argument("encrypted", help="encrypted text")
    pw = sub.add_parser(
        "pwgen", aliases=["password-generator"], help="create random passwords",
    )
    pw.add_argument(
        "length", type=int, nargs="?", default=None, help="number of chars",
    )
    return parser


def _encrypt(handler: CryptoHandler, text: str) -> None:
    print(f'text = "{text}"')
    print(f'encrypted text = "{handler.encrypt_text(text)}"')


def _decrypt(handler: CryptoHandler, encrypted: str) -> None:
    print(f'encrypted text = "{encrypted}"')
    print(f'text = "{handler.decrypt_text(encrypted)}"')


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    if args.command == "version":
        print(f"{__title__}/{__version__}")
        return 0

    try:
        config = CryptoConfig.from_env()
    except ValidationError as err:
        print(err)
        return 1
    logging.basicConfig(level=config.log_level)

    try:
        handler = CryptoHandler.from_store(SecretKeyStore(config.secret_path))
        if args.command == "encrypt":
            _encrypt(handler, args.text)
        elif args.command == "decrypt":
            _decrypt(handler, args.encrypted)
        else:
            length = config.password_length if args.length is None else args.length
            password = PasswordGenerator().generate(length)
            print("random password")
            _encrypt(handler, password)
    except (CryptoError, ValueError) as err:
        print(err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
