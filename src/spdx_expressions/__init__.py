__title__ = "spdx-expressions"
__summary__ = "Parse, normalize and serialize SPDX license expressions"

__version__ = "1.0.dev0"

__author__ = "The spdx-expressions developers"

__license__ = "BSD-2-Clause OR Apache-2.0"
__copyright__ = f"2018-present {__author__}"
