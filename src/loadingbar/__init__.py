"""A simple, customizable loading bar for the terminal.

The bar only looks right on terminals that honour carriage returns.
"""

from loadingbar.utils.progress_bar import LoadingBar, create_default, create_with_config

__all__ = ["LoadingBar", "create_default", "create_with_config"]
