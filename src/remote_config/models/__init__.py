# remote_config/models/__init__.py

from .app import (
    App,
    AppStatus
)
from .menu import (
    Menu,
    MenuType,
    ActionType
)
from .toolbar import (
    Toolbar,
    ToolbarPosition
)
from .fcm_topic import (
    FcmTopic
)
from .style import (
    Style,
    StyleCategory
)
