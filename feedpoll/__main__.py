import sys

from feedpoll.main import main

sys.exit(main())
