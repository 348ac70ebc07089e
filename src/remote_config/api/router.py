# remote_config/api/router.py

from fastapi import APIRouter
from remote_config.api.v1 import app
from remote_config.api.v1 import menu
from remote_config.api.v1 import toolbar
from remote_config.api.v1 import fcm_topic
from remote_config.api.v1 import style
from remote_config.api.v1 import remote_config
from remote_config.api.v1 import fcm

router = APIRouter(prefix="/api")

# ===================================================================
# Mobile client (read-only) routes
# ===================================================================

router.include_router(remote_config.router, prefix="/config", tags=["Mobile - Remote Config"])

# ===================================================================
# Admin routes
# ===================================================================

router.include_router(app.router, prefix="/apps", tags=["Apps"])
router.include_router(menu.router, prefix="/apps/{app_uuid}/menus", tags=["App Config - Menus"])
router.include_router(toolbar.router, prefix="/apps/{app_uuid}/toolbars", tags=["App Config - Toolbars"])
router.include_router(fcm_topic.router, prefix="/apps/{app_uuid}/fcm_topics", tags=["App Config - FCM Topics"])
router.include_router(style.router, prefix="/apps/{app_uuid}/styles", tags=["App Config - Styles"])

# ===================================================================
# Notification relay
# ===================================================================

router.include_router(fcm.router, prefix="/fcm", tags=["Notifications"])
