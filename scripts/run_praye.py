#!/usr/bin/env python3
from praye.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
