# main.py  – top-level runner (same as the `lecture-analyzer` console script)
#!/usr/bin/env python3
import sys

from lecture_analyzer.main import main

if __name__ == "__main__":
    sys.exit(main())
