# remote_config/services/config/fcm_topic_service.py

from remote_config.dao.config.fcm_topic_dao import FcmTopicDao
from remote_config.schemas.config.fcm_topic_schemas import FcmTopicRead
from remote_config.services.config.base_config_service import BaseConfigService

class FcmTopicService(BaseConfigService[FcmTopicRead]):
    dao_class = FcmTopicDao
    read_schema = FcmTopicRead
    entity_label = "FCM topic"
