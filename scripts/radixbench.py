# -*- coding: utf-8 -*-

import sys

from radixcrunch.benchmark.cli import main
from radixcrunch.utils import cli

logger = cli.getLogger(__name__, __file__)


if __name__ == "__main__":
    sys.exit(main())
