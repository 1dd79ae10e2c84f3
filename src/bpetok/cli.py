"""Command line interface for encoding and decoding with a tokenizer artifact."""

import argparse
import logging
import sys
from collections.abc import Sequence

from ._sanitise import render_token
from .config import configure_logging
from .errors import ModelLoadError
from .factory import from_pretrained
from .tokenizer import BPETokenizer

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bpetok",
        description="Byte-level BPE tokenizer for GPT-2 style tokenizer.json files.",
    )
    parser.add_argument(
        "--tokenizer",
        "-t",
        required=True,
        help="path to tokenizer.json or a directory containing it",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="print token ids for TEXT")
    enc.add_argument("text")
    enc.add_argument(
        "--no-special",
        action="store_true",
        help="do not append the end-of-sequence ids",
    )

    dec = sub.add_parser("decode", help="print the text for token IDS")
    dec.add_argument("ids", nargs="*", type=int)
    dec.add_argument(
        "--keep-special",
        action="store_true",
        help="keep end-of-sequence ids in the output",
    )

    tok = sub.add_parser("tokenize", help="print the tokens of TEXT one per line")
    tok.add_argument("text")

    sub.add_parser("info", help="print vocabulary statistics")

    return parser


def _run(tokenizer: BPETokenizer, args: argparse.Namespace) -> None:
    match args.command:
        case "encode":
            ids = tokenizer.encode(args.text, add_special_tokens=not args.no_special)
            print(" ".join(map(str, ids)))
        case "decode":
            print(tokenizer.decode(args.ids, skip_special_tokens=not args.keep_special))
        case "tokenize":
            for token in tokenizer.tokenize(args.text):
                tok_id = tokenizer.vocab.id_of(token)
                if tok_id is None:
                    tok_id = tokenizer.special_ids.unk
                # added tokens are stored as plain text, not remapped bytes
                if tokenizer.vocab.is_added(token):
                    shown = token
                else:
                    shown = render_token(token, tokenizer.codec)
                print(f"[{tok_id}] {shown}")
        case "info":
            print(f"vocab size: {tokenizer.vocab_size()}")
            print(f"merges: {tokenizer.merge_count()}")
            print(f"added tokens: {tokenizer.added_token_count()}")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``bpetok`` command."""
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        tokenizer = from_pretrained(args.tokenizer)
    except ModelLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    _run(tokenizer, args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
