# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: MIT

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
