from dataclasses import dataclass
from typing import Any, Optional, Tuple

DEFAULT_HOST = "localhost"
DEFAULT_PORT = "5984"
REPLICATOR_DB = "_replicator"


@dataclass(frozen=True)
class Configuration:
    '''Command line settings, built once and handed to every command.'''
    host: str = DEFAULT_HOST
    port: str = DEFAULT_PORT
    source: Optional[str] = None
    target: Optional[str] = None
    id: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    continuous: bool = False
    create_target: bool = False

    @classmethod
    def from_args(cls, args):
        '''args : argparse namespace returned by cli.args_gestion'''
        return cls(
            host=args.host,
            port=args.port,
            source=args.source,
            target=args.target,
            id=args.id,
            username=args.username,
            password=args.password,
            continuous=args.continuous,
            create_target=args.createTarget,
        )

    @property
    def base_url(self) -> str:
        return "http://" + self.host + ":" + str(self.port)

    @property
    def replicator_url(self) -> str:
        return self.base_url + "/" + REPLICATOR_DB

    @property
    def credentials(self) -> Optional[Tuple[str, Optional[str]]]:
        if not self.username:
            return None
        return (self.username, self.password)


@dataclass(frozen=True)
class RequestOptions:
    uri: str
    method: str = "get"
    data: Any = None
    username: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def for_config(cls, config, uri, method="get", data=None):
        '''Request options carrying the credentials of config, if any.'''
        username, password = config.credentials or (None, None)
        return cls(uri=uri, method=method, data=data, username=username, password=password)
