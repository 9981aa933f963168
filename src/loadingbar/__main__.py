import sys

from loadingbar.main import main

sys.exit(main())
