"""Appending log messages to a file."""

OUTPUT_LOG = "./log.txt"


def write_to_file(filename, message):
    """Append ``message`` to ``filename``; return whether the write succeeded."""
    try:
        with open(filename, "a", encoding="utf-8") as handle:
            handle.write(message)
    except OSError:
        return False
    return True