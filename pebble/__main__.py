import sys

from pebble.repl import main

sys.exit(main())
