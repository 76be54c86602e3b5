"""User-facing messages in English and Vietnamese.

Placeholders are positional: ``{0}``, ``{1}``, ...
"""

from __future__ import annotations

DEFAULT_LANGUAGE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "class_name_empty": "Class name cannot be empty",
        "class_name_invalid": (
            "Class name must start with an uppercase letter and contain only "
            "letters and digits (e.g. UserModel)"
        ),
        "json_empty": "JSON input cannot be empty",
        "json_invalid": "Invalid JSON: {0}",
        "empty_array": "JSON array is empty, nothing to generate",
        "file_exists": "File {0} already exists. Overwrite?",
        "cancelled": "Cancelled, {0} was not written",
        "success": "Generated {0}",
        "error": "Error: {0}",
    },
    "vi": {
        "class_name_empty": "Tên class không được để trống",
        "class_name_invalid": (
            "Tên class phải bắt đầu bằng chữ in hoa và chỉ gồm chữ cái và "
            "chữ số (ví dụ: UserModel)"
        ),
        "json_empty": "JSON không được để trống",
        "json_invalid": "JSON không hợp lệ: {0}",
        "empty_array": "Mảng JSON rỗng, không có gì để tạo",
        "file_exists": "File {0} đã tồn tại. Ghi đè?",
        "cancelled": "Đã hủy, {0} không được ghi",
        "success": "Đã tạo {0}",
        "error": "Lỗi: {0}",
    },
}


def get_message(key: str, *args: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Look up *key* in *language* (English if unknown) and fill placeholders.

    Raises KeyError for an unknown message key.
    """
    catalog = MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
    message = catalog.get(key)
    if message is None:
        message = MESSAGES[DEFAULT_LANGUAGE][key]
    for index, arg in enumerate(args):
        message = message.replace(f"{{{index}}}", str(arg))
    return message
