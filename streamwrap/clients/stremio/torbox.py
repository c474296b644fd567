from typing import Optional

from streamwrap.clients.stremio.addon import StremioAddonWrapper
from streamwrap.utils.settings import get_torbox_stremio_url, get_torbox_timeout


class TorboxWrapper(StremioAddonWrapper):
    def __init__(
        self,
        api_key: str,
        addon_name: Optional[str] = None,
        addon_id: str = "torbox",
        timeout: Optional[int] = None,
        **kwargs,
    ):
        if not api_key:
            raise ValueError("Torbox API key not found")
        super().__init__(
            addon_name or "Torbox",
            get_torbox_stremio_url() + api_key + "/",
            addon_id,
            service_id="torbox",
            timeout=timeout or get_torbox_timeout(),
            **kwargs,
        )
