import sys

from argumentative import Flags, ParseError
from argumentative.utils import setup_logging

setup_logging()

flags = Flags()
target = flags.add_string("target", "t", True, "", "Destination directory")
dry_run = flags.add_bool("dry-run", "n", "Only print what would be copied")
verbose = flags.add_bool("verbose", "v", "Chatty output")
source = flags.add_positional("source", False, ".", "Directory to copy")

if __name__ == "__main__":
    try:
        flags.parse(sys.argv)
    except ParseError as error:
        flags.render_usage("backup", "Copy files somewhere safe", error)
        sys.exit(2)

    action = "Would copy" if dry_run.value else "Copying"
    print(f"{action} {source.value} -> {target.value}")
    if verbose.value:
        print(flags.values())
