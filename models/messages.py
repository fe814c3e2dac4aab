"""
User-facing message catalog.

Exceptions carry a message code; the text shown to API clients is looked up
here at the HTTP boundary so diagnostic messages (logged) and user messages
(returned) never mix.
"""
import os

DEFAULT_LOCALE = "en"

MESSAGES = {
    "en": {
        "author.name.length": "Name must be between 1 and 255 characters.",
        "author.date_of_birth.past": "Date of birth must be in the past.",
        "author.not_found": "The specified author does not exist.",
        "book.title.length": "Title must be between 1 and 255 characters.",
        "book.price.type": "Price must be an integer.",
        "book.price.min": "Price must be 0 or greater.",
        "book.price.max": "Price must be 1,000,000 or less.",
        "book.author_ids.empty": "A book needs at least one author.",
        "book.author_ids.duplicate": "Author IDs must not contain duplicates.",
        "book.author_ids.format": "Author ID format is invalid.",
        "book.author_ids.missing": "Some of the specified authors do not exist.",
        "book.status.invalid": "Publication status is invalid.",
        "book.status.unpublish": "A published book cannot be unpublished.",
        "book.not_found": "The specified book does not exist.",
        "request.invalid": "Invalid input.",
        "request.malformed": "The request body is malformed.",
        "request.not_found": "The requested resource was not found.",
        "request.method_not_allowed": "The method is not allowed for this resource.",
        "request.unsupported_media_type": "The request body must be JSON.",
        "request.failed": "The request could not be processed.",
        "server.error": "A server error occurred.",
    },
    "ja": {
        "author.name.length": "名前は1文字以上、255文字以下でなければなりません。",
        "author.date_of_birth.past": "生年月日は過去の日付である必要があります。",
        "author.not_found": "指定された著者は存在しません。",
        "book.title.length": "書籍のタイトルは1文字以上、255文字以下でなければなりません。",
        "book.price.type": "書籍の価格は整数でなければなりません。",
        "book.price.min": "書籍の価格は0円以上でなければなりません。",
        "book.price.max": "書籍の価格は100万円以下でなければなりません。",
        "book.author_ids.empty": "書籍には少なくとも1人の著者が必要です。",
        "book.author_ids.duplicate": "書籍の著者IDは重複してはいけません。",
        "book.author_ids.format": "著者IDの形式が不正です。",
        "book.author_ids.missing": "指定された著者の一部が存在しません。",
        "book.status.invalid": "出版状況が不正です。",
        "book.status.unpublish": "出版済みの書籍を非公開にすることはできません。",
        "book.not_found": "指定された書籍は存在しません。",
        "request.invalid": "入力値にエラーがあります。",
        "request.malformed": "リクエストの形式が不正です。",
        "request.not_found": "指定されたリソースは存在しません。",
        "request.method_not_allowed": "このリソースでは許可されていないメソッドです。",
        "request.unsupported_media_type": "リクエストボディはJSONである必要があります。",
        "request.failed": "リクエストを処理できませんでした。",
        "server.error": "サーバーエラーが発生しました。",
    },
}


def translate(code: str, locale: str | None = None) -> str:
    """Return the user message for code, falling back to English, then to the code itself."""
    locale = (locale or os.getenv("MESSAGE_LOCALE", DEFAULT_LOCALE)).lower()
    catalog = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    return catalog.get(code) or MESSAGES[DEFAULT_LOCALE].get(code, code)
