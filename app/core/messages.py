"""User-facing error texts, keyed by locale."""

from __future__ import annotations

DEFAULT_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "missing_api_key": "Missing YOUTUBE_API_KEY on server.",
        "missing_channel": "Missing ?channel=",
        "channel_not_found": "Could not resolve channelId from channel/handle.",
        "subscriber_count_unavailable": "Subscriber count not available.",
        "upstream_error": "YouTube API error",
        "server_error": "Server error",
    },
    "ko": {
        "missing_api_key": "서버에 YOUTUBE_API_KEY가 설정되지 않았습니다.",
        "missing_channel": "?channel= 파라미터가 필요합니다.",
        "channel_not_found": "채널을 찾을 수 없습니다. 핸들 또는 채널 ID를 확인하세요.",
        "subscriber_count_unavailable": "구독자 수를 확인할 수 없습니다.",
        "upstream_error": "YouTube API 오류",
        "server_error": "서버 오류",
    },
}


def get_message(key: str, locale: str | None = None) -> str:
    """Return the text for ``key`` in ``locale``, falling back to English."""

    texts = MESSAGES.get((locale or DEFAULT_LOCALE).split("_")[0].lower(), MESSAGES[DEFAULT_LOCALE])
    return texts.get(key) or MESSAGES[DEFAULT_LOCALE][key]
