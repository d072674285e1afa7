from .auth import AuthClient
from .books import BooksClient
from .gatherings import GatheringsClient
from .keywords import KeywordsClient
from .meetings import MeetingsClient
from .pre_opinions import PreOpinionsClient
from .topics import TopicsClient
from .users import UsersClient

__all__ = [
    "AuthClient",
    "BooksClient",
    "GatheringsClient",
    "KeywordsClient",
    "MeetingsClient",
    "PreOpinionsClient",
    "TopicsClient",
    "UsersClient",
]
