"""Build a ready-to-run drop folder processor from configuration."""

from show_runner.config import ShowRunnerConfig
from show_runner.interfaces import (
    DocumentStore,
    PresenterProtocol,
    RosterSource,
    StorageBackend,
    TextGenerator,
)
from show_runner.orchestration.drop_folder_processor import DropFolderProcessor
from show_runner.orchestration.episode_processor import EpisodeProcessor
from show_runner.services import (
    CsvRosterSource,
    EpisodeDirectory,
    EpisodeOrganizer,
    FileClassifier,
    GeminiService,
    LocalFolderStorage,
    MarkdownDocumentStore,
    ShowNotesService,
)


def create_processor(
    config: ShowRunnerConfig,
    presenter: PresenterProtocol,
    storage: StorageBackend | None = None,
    roster_source: RosterSource | None = None,
    text_generator: TextGenerator | None = None,
    document_store: DocumentStore | None = None,
) -> DropFolderProcessor:
    """Create all services and load the roster.

    Collaborators default to the local implementations; pass others to
    run against different backends.

    Args:
        config: Validated configuration
        presenter: Output presenter
        storage: Storage backend (default: LocalFolderStorage)
        roster_source: Roster source (default: CsvRosterSource)
        text_generator: Text generator (default: GeminiService)
        document_store: Document store (default: MarkdownDocumentStore)

    Returns:
        DropFolderProcessor ready to run

    Raises:
        RosterError: If the roster cannot be read
    """
    storage = storage or LocalFolderStorage()
    roster_source = roster_source or CsvRosterSource()
    text_generator = text_generator or GeminiService(config)
    document_store = document_store or MarkdownDocumentStore(config.document_staging_folder)

    directory = EpisodeDirectory(config)
    directory.load(roster_source)

    classifier = FileClassifier(config)
    episode_processor = EpisodeProcessor(
        config=config,
        directory=directory,
        classifier=classifier,
        organizer=EpisodeOrganizer(config, storage),
        show_notes=ShowNotesService(config, text_generator, document_store),
        presenter=presenter,
    )

    return DropFolderProcessor(
        storage=storage,
        classifier=classifier,
        episode_processor=episode_processor,
        presenter=presenter,
    )
