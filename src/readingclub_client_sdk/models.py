from __future__ import annotations

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")
C = TypeVar("C")


class ApiResponse(BaseModel, Generic[T]):
    code: str
    message: str
    data: Optional[T] = None


class ApiErrorResponse(BaseModel):
    code: str
    message: str
    data: None = None


class PageResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(populate_by_name=True)

    content: List[T]
    total_pages: int = Field(alias="totalPages")
    total_elements: int = Field(alias="totalElements")
    size: int
    number: int

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages


class CursorPageResponse(BaseModel, Generic[T, C]):
    model_config = ConfigDict(populate_by_name=True)

    items: List[T]
    page_size: int = Field(alias="pageSize")
    has_next: bool = Field(alias="hasNext")
    next_cursor: Optional[C] = Field(default=None, alias="nextCursor")
    total_count: Optional[int] = Field(default=None, alias="totalCount")


class CurrentUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    nickname: Optional[str] = None
    profile_image_url: Optional[str] = Field(default=None, alias="profileImageUrl")
    needs_onboarding: bool = Field(default=False, alias="needsOnboarding")


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    nickname: Optional[str] = None
    email: str
    profile_image_url: Optional[str] = Field(default=None, alias="profileImageUrl")
    created_at: str = Field(alias="createdAt")


class NicknameCheckResult(BaseModel):
    available: bool


class Keyword(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    type: Optional[str] = None


class BookDetail(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    book_id: int = Field(alias="bookId")
    title: str
    publisher: Optional[str] = None
    authors: Optional[str] = None
    book_reading_status: Optional[str] = Field(default=None, alias="bookReadingStatus")
    thumbnail: Optional[str] = None


class BookReview(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    review_id: int = Field(alias="reviewId")
    book_id: int = Field(alias="bookId")
    user_id: int = Field(alias="userId")
    rating: float
    keywords: List[Keyword] = Field(default_factory=list)
    created_at: Optional[str] = Field(default=None, alias="createdAt")


class TopicLikeResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    topic_id: int = Field(alias="topicId")
    liked: bool
    new_count: int = Field(alias="newCount")


class PreOpinionMemberInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    nickname: str
    profile_image: Optional[str] = Field(default=None, alias="profileImage")
    role: str


class BookReviewSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rating: float
    keyword_info: List[Keyword] = Field(default_factory=list, alias="keywordInfo")


class TopicOpinion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    topic_id: int = Field(alias="topicId")
    content: Optional[str] = None


class PreOpinionMember(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    member_info: PreOpinionMemberInfo = Field(alias="memberInfo")
    is_submitted: bool = Field(alias="isSubmitted")
    book_review: Optional[BookReviewSummary] = Field(default=None, alias="bookReview")
    topic_opinions: List[TopicOpinion] = Field(default_factory=list, alias="topicOpinions")


class PreOpinionAnswers(BaseModel):
    topics: List[dict[str, Any]] = Field(default_factory=list)
    members: List[PreOpinionMember] = Field(default_factory=list)


JsonObject = dict[str, Any]
