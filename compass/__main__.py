import sys

from compass.main import main

sys.exit(main())
