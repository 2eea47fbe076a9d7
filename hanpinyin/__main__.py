import sys

from hanpinyin.cli import main

sys.exit(main())
