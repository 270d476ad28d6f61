"""config_loading.py"""

import sys
from pathlib import Path

from argumentative import ParseError
from argumentative.config import load_config

config = load_config(Path(__file__).with_name("backup.yaml"))
flags = config.to_flags()

if __name__ == "__main__":
    try:
        flags.parse(sys.argv)
    except ParseError as error:
        flags.render_usage(config.title, config.description, error)
        sys.exit(2)
    print(flags.values())
