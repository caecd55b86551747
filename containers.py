from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer

from repositories.firestore import FirestoreConnection, FirestoreDocumentRepository


class Container(DeclarativeContainer):
    config = providers.Configuration()

    connection = providers.ThreadSafeSingleton(
        FirestoreConnection,
        database=config.firestore.database,
        project=config.firestore.project,
    )
    document_repo = providers.ThreadSafeSingleton(
        FirestoreDocumentRepository,
        connection=connection,
        default_batch_size=config.erase.batch_size,
    )
