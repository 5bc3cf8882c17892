from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    app_name: str = 'Book-API'

    # same credentials are shared by the api server and both migrators
    db_host: str = 'localhost'
    db_port: int = 5432
    db_username: str = 'root'
    db_password: str = 'secret'
    db_name: str = 'nextcrm'

    database_url: str = ''
    migration_database_url: str = ''
    sql_echo: bool = False

    server_host: str = '127.0.0.1'
    server_port: int = 8080

    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    def _dsn(self, driver: str):
        return (f'postgresql+{driver}://{self.db_username}:{self.db_password}'
                f'@{self.db_host}:{self.db_port}/{self.db_name}')

    @property
    def async_database_url(self) -> str:
        return self.database_url or self._dsn('asyncpg')

    @property
    def sync_database_url(self) -> str:
        return self.migration_database_url or self._dsn('psycopg')
