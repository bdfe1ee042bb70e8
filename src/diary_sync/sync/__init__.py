"""Diary synchronization.

- DiarySyncClient: async create/list/delete/like/unlike returning results
- CallbackBridge / DiaryCallbackApi: callback-style access on a background loop
- LikeToggle: caller-side liked flag with deferred flip
"""

from .callbacks import CallbackBridge, DiaryCallbackApi
from .diary_client import DiarySyncClient
from .like_toggle import LikeState, LikeToggle
from .result import Failure, Success, SyncResult

__all__ = [
    "CallbackBridge",
    "DiaryCallbackApi",
    "DiarySyncClient",
    "Failure",
    "LikeState",
    "LikeToggle",
    "Success",
    "SyncResult",
]
