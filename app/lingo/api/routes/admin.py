"""Administrative routes."""

from fastapi import APIRouter, HTTPException

from lingo.core.logging import get_module_logger
from lingo.i18n.exceptions import I18nError
from lingo.services import MessageSourceDep

logger = get_module_logger()
router = APIRouter(tags=["Admin"])


@router.post("/admin/reload")
def reload_catalogs(source: MessageSourceDep):
    """Reload message catalogs from disk.

    A rejected reload leaves the previously loaded catalogs in service.
    """
    try:
        version = source.reload()
    except (I18nError, ValueError) as e:
        logger.warning(
            "admin_reload_rejected", error=str(e), active_version=source.version
        )
        raise HTTPException(status_code=422, detail=str(e)) from e

    return {"status": "reloaded", "version": version}
