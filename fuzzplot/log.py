"""Status messages on stderr, colored like the rest of the fuzzer tooling."""
import sys

PROG = "fuzzplot"

_quiet = False


def set_quiet(quiet: bool):
    global _quiet
    _quiet = quiet


def start(*args):
    if not _quiet:
        print(f"\033[01;32m[*]\033[0;m {PROG}", *args, file=sys.stderr)


def info(*args):
    if not _quiet:
        print(f"\033[01;92m[+]\033[0;m {PROG}:", *args, file=sys.stderr)


def warning(*args):
    if not _quiet:
        print(f"{PROG}: \033[01;33mWarning:\033[0;m", *args, file=sys.stderr)


def error(*args):
    # errors are printed even with --quiet
    print(f"{PROG}: \033[01;31merror:\033[0m", *args, file=sys.stderr)
