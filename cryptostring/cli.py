import argparse
import logging
import os
import sys
from typing import List, Optional

from .codec import CodecConfig, decode, encode, load_codec_config, wrap_text
from .value import make_cryptostring, parse_cryptostring, require_cryptostring


def _read_bytes(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write_bytes(path: str, data: bytes) -> None:
    if path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        with open(path, "wb") as f:
            f.write(data)


def _write_text(path: str, text: str) -> None:
    if path == "-":
        sys.stdout.write(text)
        sys.stdout.flush()
    else:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Base85 and CryptoString tool")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        default=None,
        help="Path to a JSON codec config (allow_short_tail, wrap_width)",
    )

    enc = subparsers.add_parser("encode", parents=[common])
    enc.add_argument("--input-bytes", required=True)
    enc.add_argument("--output-text", required=True)
    enc.add_argument(
        "--wrap-width",
        type=int,
        default=None,
        help="Split the encoded text into lines of this many characters",
    )

    dec = subparsers.add_parser("decode", parents=[common])
    dec.add_argument("--input-text", required=True)
    dec.add_argument("--output-bytes", required=True)
    dec.add_argument(
        "--allow-short-tail",
        action="store_true",
        help="Drop a dangling one-character tail instead of failing",
    )

    pack = subparsers.add_parser("pack")
    pack.add_argument("--label", required=True, help="Algorithm label, e.g. ED25519")
    pack.add_argument("--input-bytes", required=True)
    pack.add_argument("--output-text", required=True)

    unpack = subparsers.add_parser("unpack")
    unpack.add_argument("--input-text", required=True)
    unpack.add_argument("--output-bytes", required=True)

    inspect = subparsers.add_parser("inspect")
    inspect.add_argument("--input-text", required=True)

    return parser


def _load_config(args) -> CodecConfig:
    if args.config is None:
        return CodecConfig()
    if not os.path.exists(args.config):
        raise ValueError(f"--config file not found: {args.config}")
    return load_codec_config(args.config)


def run_encode(args) -> None:
    cfg = _load_config(args)
    wrap_width = args.wrap_width if args.wrap_width is not None else cfg.wrap_width
    text = encode(_read_bytes(args.input_bytes))
    if wrap_width is not None:
        text = wrap_text(text, wrap_width)
    _write_text(args.output_text, text + "\n")


def run_decode(args) -> None:
    cfg = _load_config(args)
    if args.allow_short_tail:
        cfg.allow_short_tail = True
    text = _read_text(args.input_text)
    # An empty payload encodes to a bare newline
    data = b"" if text.strip() == "" else decode(text, cfg)
    _write_bytes(args.output_bytes, data)


def run_pack(args) -> None:
    value = make_cryptostring(args.label, _read_bytes(args.input_bytes))
    if not value.is_valid():
        raise ValueError(f"cannot build CryptoString: {value.reason}")
    _write_text(args.output_text, value.as_string() + "\n")


def run_unpack(args) -> None:
    value = require_cryptostring(_read_text(args.input_text).strip())
    _write_bytes(args.output_bytes, value.raw_bytes())


def run_inspect(args) -> None:
    value = parse_cryptostring(_read_text(args.input_text).strip())
    if not value.is_valid():
        print("valid: no")
        print(f"reason: {value.reason}")
        return
    raw = value.raw_bytes()
    print("valid: yes")
    print(f"prefix: {value.prefix}")
    print(f"data: {value.data}")
    print(f"raw length: {len(raw)}")


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "encode":
            run_encode(args)
        elif args.command == "decode":
            run_decode(args)
        elif args.command == "pack":
            run_pack(args)
        elif args.command == "unpack":
            run_unpack(args)
        elif args.command == "inspect":
            run_inspect(args)
        else:
            parser.error("Unknown command")
    except ValueError as exc:
        parser.error(str(exc))


__all__ = [
    "build_arg_parser",
    "run_encode",
    "run_decode",
    "run_pack",
    "run_unpack",
    "run_inspect",
    "main",
]
