import sys

from rt_one.main import main

sys.exit(main())
