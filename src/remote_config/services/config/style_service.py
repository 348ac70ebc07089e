# remote_config/services/config/style_service.py

from remote_config.dao.config.style_dao import StyleDao
from remote_config.schemas.config.style_schemas import StyleRead
from remote_config.services.config.base_config_service import BaseConfigService

class StyleService(BaseConfigService[StyleRead]):
    dao_class = StyleDao
    read_schema = StyleRead
    entity_label = "Style"
