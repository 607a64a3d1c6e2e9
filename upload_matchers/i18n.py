from __future__ import annotations

from typing import Dict


_MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "content_type_invalid": "has an invalid content type",
        "blank": "can't be blank",
        "file_size_not_less_than": "file size must be less than {max_size} (current size is {file_size})",
        "file_size_not_less_than_or_equal_to": "file size must be less than or equal to {max_size} (current size is {file_size})",
        "file_size_not_greater_than": "file size must be greater than {min_size} (current size is {file_size})",
        "file_size_not_greater_than_or_equal_to": "file size must be greater than or equal to {min_size} (current size is {file_size})",
        "file_size_not_between": "file size must be between {min_size} and {max_size} (current size is {file_size})",
    },
    "fa": {
        "content_type_invalid": "نوع محتوای فایل مجاز نیست",
        "blank": "نباید خالی باشد",
        "file_size_not_less_than": "حجم فایل باید کمتر از {max_size} باشد (حجم فعلی {file_size} است)",
        "file_size_not_less_than_or_equal_to": "حجم فایل باید کمتر یا مساوی {max_size} باشد (حجم فعلی {file_size} است)",
        "file_size_not_greater_than": "حجم فایل باید بیشتر از {min_size} باشد (حجم فعلی {file_size} است)",
        "file_size_not_greater_than_or_equal_to": "حجم فایل باید بیشتر یا مساوی {min_size} باشد (حجم فعلی {file_size} است)",
        "file_size_not_between": "حجم فایل باید بین {min_size} و {max_size} باشد (حجم فعلی {file_size} است)",
    },
}

_SIZE_UNITS = ("KB", "MB", "GB", "TB")


def t(key: str, lang: str) -> str:
    return _MESSAGES.get(lang, _MESSAGES["en"]).get(key, key)


def human_size(size: int) -> str:
    if size < 1024:
        return "1 Byte" if size == 1 else f"{size} Bytes"
    value = float(size)
    unit = "Bytes"
    for unit in _SIZE_UNITS:
        value /= 1024.0
        if value < 1024:
            break
    text = f"{value:.1f}".rstrip("0").rstrip(".")
    return f"{text} {unit}"
