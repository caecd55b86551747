import logging
import os
import threading
from collections.abc import Callable, Mapping
from typing import Any

from google.auth.credentials import Credentials
from google.cloud.firestore_v1 import AsyncClient
from google.oauth2 import service_account

from repositories.errors import NotInitializedError

from .constants import DEFAULT_DATABASE

CredentialsSource = Credentials | Mapping[str, Any] | str | os.PathLike[str] | None
CredentialsLike = CredentialsSource | Callable[[], CredentialsSource]


def load_credentials(credentials: CredentialsLike) -> Credentials | None:
    """
    Resolve the supported credential sources into google-auth credentials.

    Accepts a ready credentials object, a service account info mapping, a path to a service
    account key file, or a callable returning one of those. None defers to Application Default
    Credentials (which also covers the Firestore emulator).
    """
    if callable(credentials) and not isinstance(credentials, Credentials):
        credentials = credentials()

    if credentials is None or isinstance(credentials, Credentials):
        return credentials

    if isinstance(credentials, Mapping):
        return service_account.Credentials.from_service_account_info(dict(credentials))  # type: ignore[no-untyped-call]

    if isinstance(credentials, str | os.PathLike):
        return service_account.Credentials.from_service_account_file(os.fspath(credentials))  # type: ignore[no-untyped-call]

    raise TypeError(f'Unsupported credentials type: {type(credentials).__name__}')


class FirestoreConnection:
    def __init__(self, database: str = DEFAULT_DATABASE, project: str | None = None) -> None:
        self.database = database
        self.project = project
        self.logger = logging.getLogger(self.__class__.__name__)
        self._client: AsyncClient | None = None
        self._lock = threading.Lock()

    @property
    def connected(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> AsyncClient:
        if self._client is None:
            raise NotInitializedError

        return self._client

    def connect(self, credentials: CredentialsLike = None) -> AsyncClient:
        with self._lock:
            if self._client is not None:
                self.logger.debug('Already connected to database %s, reusing client', self.database)
                return self._client

            creds = load_credentials(credentials)
            project = self.project or getattr(creds, 'project_id', None)

            self._client = AsyncClient(project=project, credentials=creds, database=self.database)
            self.logger.info('Connected to Firestore database %s (project %s)', self.database, self._client.project)

            return self._client

    def disconnect(self) -> None:
        with self._lock:
            self._client = None
