import shlex

from prompt_toolkit import PromptSession

from argumentative import Flags, ParseError
from argumentative.completer import FlagCompleter

flags = Flags()
flags.add_string("target", "t", False, "/tmp/backup", "Destination directory")
flags.add_string("mode", "m", False, "incremental", "Backup mode")
flags.add_bool("verbose", "v", "Chatty output")
flags.add_bool("compress", "z", "Compress the archive")
flags.add_positional("source", True, "", "Directory to copy")

session = PromptSession("backup> ", completer=FlagCompleter(flags))

if __name__ == "__main__":
    line = session.prompt()
    try:
        flags.parse(["backup", *shlex.split(line)])
    except ParseError as error:
        flags.render_usage("backup", "Copy files somewhere safe", error)
    else:
        print(flags.values())
