"""Message lookup routes.

Resolves messages against the client's Accept-Language header and reports
the locale actually used through Content-Language.
"""

from typing import List, Optional

from fastapi import APIRouter, Header, HTTPException, Query, Response

from lingo.i18n.exceptions import MalformedTemplate, MissingKey
from lingo.services import MessageSourceDep, SettingsDep

router = APIRouter(tags=["Messages"])


@router.get("/messages/{key}")
def get_message(
    key: str,
    response: Response,
    source: MessageSourceDep,
    settings: SettingsDep,
    args: List[str] = Query(default=[]),
    accept_language: Optional[str] = Header(default=None),
):
    """Resolve a message key for the caller's language preference."""
    try:
        message = source.get_message(key, accept_language, args)
    except MissingKey as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except MalformedTemplate as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    content_language = (
        settings.i18n.DEFAULT_LANGUAGE if message.is_default else message.locale_tag
    )
    response.headers["Content-Language"] = content_language

    return {
        "key": key,
        "text": message.text,
        "locale": message.locale_tag,
    }


@router.get("/locales")
def get_locales(source: MessageSourceDep):
    """List the locales of the active catalog set."""
    return {
        "locales": [str(locale) for locale in source.available_locales()],
        "version": source.version,
    }
