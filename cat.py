import shutil
import sys
from typing import *


def concatenate(paths: Iterable[str], out: BinaryIO):
    """Copy each file in `paths` to `out`, in order, stopping at the first error."""
    for path in paths:
        with open(path, "rb") as f:
            shutil.copyfileobj(f, out)
        out.flush()


def describe(error: OSError) -> str:
    reason = error.strerror or str(error)
    if error.filename is not None:
        return f"cat: {error.filename}: {reason}"

    return f"cat: {reason}"


def main(argv: Optional[List[str]] = None) -> int:
    files = sys.argv[1:] if argv is None else argv
    try:
        concatenate(files, sys.stdout.buffer)
    except BrokenPipeError as e:
        print(describe(e), file=sys.stderr)
        # the reader is gone; don't let the exit-time flush raise again
        try:
            sys.stdout.close()
        except OSError:
            pass

        return 1
    except OSError as e:
        print(describe(e), file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
