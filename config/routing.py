from channels.routing import URLRouter
from channels.security.websocket import AllowedHostsOriginValidator

import apps.notice.routing

websocket_application = AllowedHostsOriginValidator(
    URLRouter(
        apps.notice.routing.websocket_urlpatterns,
    )
)
