import sys

from gattuuid import cli

sys.exit(cli())
