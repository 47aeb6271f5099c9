"""IAM user-admin client package.

To use the services:
    from iam_admin import IAM, IAMClient

To load configuration from the environment:
    from iam_admin.config import load_settings
"""
from .core.user_admin import *  # noqa: F401,F403
from .core.user_admin import __all__ as _user_admin_all

__version__ = "0.1.0"

__all__ = list(_user_admin_all) + ["__version__"]
