import logging

logger = logging.getLogger("hanpinyin")
