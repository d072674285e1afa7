from __future__ import annotations

API_BASE = "/api"

AUTH = f"{API_BASE}/auth"
USERS = f"{API_BASE}/users"
BOOK = f"{API_BASE}/book"
GATHERINGS = f"{API_BASE}/gatherings"
MEETINGS = f"{API_BASE}/meetings"
KEYWORDS = f"{API_BASE}/keywords"

AUTH_ME = f"{AUTH}/me"
AUTH_LOGOUT = f"{AUTH}/logout"
KAKAO_AUTHORIZATION = "/oauth2/authorization/kakao"

USER_ME = f"{USERS}/me"
USER_ONBOARDING = f"{USERS}/onboarding"
USER_CHECK_NICKNAME = f"{USERS}/check-nickname"
USER_PROFILE_IMAGE = f"{USERS}/me/profile-image"

BOOK_SEARCH = f"{BOOK}/search"

GATHERING_FAVORITES = f"{GATHERINGS}/favorites"
MEETING_TAB_COUNTS = f"{MEETINGS}/tab-counts"


def book_detail(book_id: int) -> str:
    return f"{BOOK}/{book_id}"


def book_toggle_reading(book_id: int) -> str:
    return f"{BOOK}/{book_id}/isReading"


def book_review_me(book_id: int) -> str:
    return f"{BOOK}/{book_id}/reviews/me"


def book_reviews(book_id: int) -> str:
    return f"{BOOK}/{book_id}/reviews"


def book_review_history(book_id: int) -> str:
    return f"{BOOK}/{book_id}/reviews/history"


def book_records(personal_book_id: int) -> str:
    return f"{BOOK}/{personal_book_id}/records"


def book_record(personal_book_id: int, record_id: int) -> str:
    return f"{BOOK}/{personal_book_id}/records/{record_id}"


def gathering_detail(gathering_id: int) -> str:
    return f"{GATHERINGS}/{gathering_id}"


def gathering_favorite(gathering_id: int) -> str:
    return f"{GATHERINGS}/{gathering_id}/favorites"


def gathering_join_request(invitation_code: str) -> str:
    return f"{GATHERINGS}/join-request/{invitation_code}"


def gathering_meetings(gathering_id: int) -> str:
    return f"{GATHERINGS}/{gathering_id}/meetings"


def gathering_books(gathering_id: int) -> str:
    return f"{GATHERINGS}/{gathering_id}/books"


def gathering_members(gathering_id: int) -> str:
    return f"{GATHERINGS}/{gathering_id}/members"


def gathering_join_decision(gathering_id: int, member_id: int) -> str:
    return f"{GATHERINGS}/{gathering_id}/join-requests/{member_id}"


def gathering_member(gathering_id: int, user_id: int) -> str:
    return f"{GATHERINGS}/{gathering_id}/members/{user_id}"


def meeting_approvals(gathering_id: int) -> str:
    return f"{GATHERINGS}/{gathering_id}/meetings/approvals"


def meeting_detail(meeting_id: int) -> str:
    return f"{MEETINGS}/{meeting_id}"


def meeting_reject(meeting_id: int) -> str:
    return f"{MEETINGS}/{meeting_id}/reject"


def meeting_confirm(meeting_id: int) -> str:
    return f"{MEETINGS}/{meeting_id}/confirm"


def meeting_join(meeting_id: int) -> str:
    return f"{MEETINGS}/{meeting_id}/join"


def topics(gathering_id: int, meeting_id: int) -> str:
    return f"{GATHERINGS}/{gathering_id}/meetings/{meeting_id}/topics"


def confirmed_topics(gathering_id: int, meeting_id: int) -> str:
    return f"{GATHERINGS}/{gathering_id}/meetings/{meeting_id}/confirm-topics"


def topic(gathering_id: int, meeting_id: int, topic_id: int) -> str:
    return f"{topics(gathering_id, meeting_id)}/{topic_id}"


def topic_likes(gathering_id: int, meeting_id: int, topic_id: int) -> str:
    return f"{topic(gathering_id, meeting_id, topic_id)}/likes"


def pre_opinion_answers(gathering_id: int, meeting_id: int) -> str:
    return f"{GATHERINGS}/{gathering_id}/meetings/{meeting_id}/answers"


def my_pre_opinion_answer(gathering_id: int, meeting_id: int) -> str:
    return f"{topics(gathering_id, meeting_id)}/answers/me"


def my_pre_opinion(meeting_id: int) -> str:
    return f"{MEETINGS}/{meeting_id}/pre-opinions/me"
