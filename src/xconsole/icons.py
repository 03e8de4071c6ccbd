"""
Optional icon pack support.

An icon pack is any mapping, or any object with attributes, holding
prefix strings under fixed icon names. ICON_PACK_MAP says which icon
each built-in method uses.

The default loader imports a module (``emoji_icons`` unless configured
otherwise) in a worker thread and uses its ``ICONS`` mapping when it has
one, otherwise the module's own attributes. Loading may fail; callers
treat a failure as "no icon pack".
"""

import asyncio
import importlib
from typing import Any, Mapping, Optional

from xconsole.config import DEFAULT_ICON_PACK_MODULE


# Console method -> icon name inside the pack
ICON_PACK_MAP = {
    'log':        'pin',
    'success':    'check_green',
    'warn':       'warn',
    'error':      'fail',
    'info':       'info',
    'check':      'success',
    'skip':       'skip',
    'connect':    'connect',
    'disconnect': 'disconnect',
}


async def load_icon_pack(module_name: str = DEFAULT_ICON_PACK_MODULE) -> Any:
    """Import an icon pack module without blocking the event loop.

    Raises whatever the import raises (usually ModuleNotFoundError).
    """
    module = await asyncio.to_thread(importlib.import_module, module_name)
    return getattr(module, 'ICONS', module)


def icon_for(pack: Any, method: str) -> Optional[str]:
    """Return the pack's icon for a console method, or None.

    Empty values count as missing.
    """
    if pack is None:
        return None
    icon_name = ICON_PACK_MAP.get(method)
    if icon_name is None:
        return None
    if isinstance(pack, Mapping):
        value = pack.get(icon_name)
    else:
        value = getattr(pack, icon_name, None)
    return value or None
