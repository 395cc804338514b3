# Copyright (c) 2025 Arne Deutsch, itemis AG, MIT License
import sys

from pathfinder.cli import main

sys.exit(main())
