"""Turn a line of space-separated hex bytes into a 0x-prefixed list."""

import sys


def to_byte_list(text: str) -> str:
    """Prefix each space-separated token with 0x and join them with commas.

    A token followed by a space keeps its trailing ", "; the last token of the
    line does not when nothing follows it.
    """
    segments = text.split(" ")
    *terminated, last = segments
    head = "".join(f"0x{token}, " for token in terminated if token)
    return head + (f"0x{last}" if last else "")


def main(argv=None) -> int:
    """Read one line (or take it from the arguments) and print it as a byte list."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        line = " ".join(args)
    else:
        line = sys.stdin.readline()
        if line.endswith("\n"):
            line = line[:-1]
    print(to_byte_list(line), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())