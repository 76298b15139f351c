from .mysql_driver import MySQLDriver

class DatabaseManager:
    _instance = None

    def __init__(self, settings):
        self.mysql = MySQLDriver(settings.DATABASE_URL, echo=settings.DB_ECHO)

    @classmethod
    def get_instance(cls, settings=None):
        if cls._instance is None:
            if settings is None:
                from framework.config import settings as app_settings
                settings = app_settings
            cls._instance = cls(settings)
        return cls._instance

    @classmethod
    async def shutdown(cls):
        """Dispose the engine if one was created, and forget the instance."""
        if cls._instance is not None:
            await cls._instance.mysql.disconnect()
            cls._instance = None
