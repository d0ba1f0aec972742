"""
REST API endpoints over the shared storage state.

Values are addressed by path strings such as ``form.values[0].name``.
Writes do not install a new snapshot unless `force_update` is set or
`/storage/refresh` is called, mirroring `StorageState` semantics.
"""
from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel

from valuestore_lib.errors import KeyFormatException, KeyNotFound, RawValueDetected
from valuestore_lib.server.health import get_health
from valuestore_lib.services.resolver import resolve_service
from valuestore_lib.state.global_state import GLOBAL_STORAGE_KEY

import logging
router = APIRouter()
logger = logging.getLogger(__name__)


class SetValuePayload(BaseModel):
    path: str
    value: Any = None
    force_update: bool = False


def _state(request: Request):
    return resolve_service(request, GLOBAL_STORAGE_KEY)


@router.get('/storage/value')
async def api_storage_get(request: Request, path: str = Query('')):
    """
    Read the value at `path`.

    Returns:
        {"path": <path>, "value": <value or null>}
    """
    state = _state(request)
    try:
        value = state.get_storage_value(path)
    except KeyFormatException as e:
        raise HTTPException(status_code=400, detail={'error': 'key_format', 'message': str(e)})
    except KeyNotFound as e:
        raise HTTPException(status_code=404, detail={'error': 'key_not_found', 'message': str(e), 'partial': e.partial})
    return {'path': path, 'value': value}


@router.put('/storage/value')
async def api_storage_set(request: Request, payload: SetValuePayload):
    state = _state(request)
    try:
        state.set_storage_value(payload.path, payload.value, force_update_state=payload.force_update)
    except KeyFormatException as e:
        raise HTTPException(status_code=400, detail={'error': 'key_format', 'message': str(e)})
    except RawValueDetected as e:
        raise HTTPException(status_code=409, detail={'error': 'raw_value_detected', 'message': str(e), 'partial': e.partial})
    logger.debug("Stored value at %s via API", payload.path)
    return {'ok': True, 'version': state.version}


@router.delete('/storage/value')
async def api_storage_delete(request: Request, path: str = Query(''),
                             preserve_length: bool = Query(False),
                             force_update: bool = Query(False)):
    """
    Remove the value at `path`. Unreachable paths are not an error.

    Query params:
        preserve_length: keep the slot as null instead of removing it
        force_update: install a fresh snapshot afterwards
    """
    state = _state(request)
    removed = state.delete_storage_value(path, set_undefined=preserve_length, force_update_state=force_update)
    return {'ok': True, 'removed': removed, 'version': state.version}


@router.post('/storage/refresh')
async def api_storage_refresh(request: Request):
    state = _state(request)
    state.update_storage_state()
    return {'ok': True, 'version': state.version}


@router.get('/storage/snapshot')
async def api_storage_snapshot(request: Request):
    state = _state(request)
    return {'version': state.version, 'data': state.storage.to_dict()}


@router.get('/health')
async def api_health(request: Request):
    return get_health(_state(request).storage)
