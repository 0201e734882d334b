import sys

from client.screens import main

sys.exit(main())
