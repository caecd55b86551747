import os

from gcp_microservice_utils import setup_cloud_logging

from containers import Container
from repositories import DocumentRepository
from repositories.firestore import DEFAULT_BATCH_SIZE, DEFAULT_DATABASE


def create_container() -> Container:
    if os.getenv('ENABLE_CLOUD_LOGGING') == '1':
        setup_cloud_logging()  # pragma: no cover

    container = Container()

    container.config.firestore.database.from_env('FIRESTORE_DATABASE', DEFAULT_DATABASE)
    container.config.firestore.project.from_env('GOOGLE_CLOUD_PROJECT', None)
    container.config.firestore.credentials.from_env('FIRESTORE_CREDENTIALS', None)
    container.config.erase.batch_size.from_env('ERASE_BATCH_SIZE', str(DEFAULT_BATCH_SIZE), as_=int)

    return container


def connect_store(container: Container) -> DocumentRepository:
    container.connection().connect(container.config.firestore.credentials())
    return container.document_repo()
