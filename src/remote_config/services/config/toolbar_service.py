# remote_config/services/config/toolbar_service.py

from remote_config.dao.config.toolbar_dao import ToolbarDao
from remote_config.schemas.config.toolbar_schemas import ToolbarRead, ToolbarButton
from remote_config.services.config.base_config_service import BaseConfigService

class ToolbarService(BaseConfigService[ToolbarRead]):
    dao_class = ToolbarDao
    read_schema = ToolbarRead
    entity_label = "Toolbar"

    def _to_columns(self, data: dict) -> dict:
        # 按钮数组整体序列化后写入 JSON 列，每次更新都整体替换
        if data.get("buttons") is not None:
            data["buttons"] = [
                ToolbarButton.model_validate(button).model_dump(mode="json")
                for button in data["buttons"]
            ]
        return data
