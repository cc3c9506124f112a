"""Tests for FileClassifier."""

import pytest

from show_runner.config import ShowRunnerConfig
from show_runner.models import Classification, MediaKind
from show_runner.services.file_classifier import FileClassifier

GOOGLE_DOC = "application/vnd.google-apps.document"


@pytest.fixture
def classifier():
    return FileClassifier(ShowRunnerConfig())


class TestKindForMime:
    """Tests for FileClassifier.kind_for_mime."""

    @pytest.mark.parametrize(
        "mime,kind",
        [
            ("video/mp4", MediaKind.VIDEO),
            ("text/plain", MediaKind.PLAIN_TEXT),
            ("application/pdf", MediaKind.PDF),
            (GOOGLE_DOC, MediaKind.RICH_DOC),
            ("image/png", MediaKind.OTHER),
            ("video/quicktime", MediaKind.OTHER),
        ],
    )
    def test_default_mapping(self, classifier, mime, kind):
        assert classifier.kind_for_mime(mime) is kind

    def test_unconfigured_transcript_type_is_other(self):
        classifier = FileClassifier(ShowRunnerConfig(transcript_mime_types=("application/pdf",)))
        assert classifier.kind_for_mime("text/plain") is MediaKind.OTHER


class TestClassify:
    """Tests for FileClassifier.classify."""

    def test_partitions_listing(self, classifier, make_stored):
        listing = classifier.classify(
            [
                make_stored("Fred Vogelstein.mp4"),
                make_stored("Fred Vogelstein.txt", "text/plain"),
                make_stored("Ep001_Ada Lovelace.mp4"),
                make_stored("cover.png", "image/png"),
            ]
        )

        assert [o.name for o in listing.unprocessed_media] == ["Fred Vogelstein.mp4"]
        assert [o.name for o in listing.candidate_transcripts] == ["Fred Vogelstein.txt"]
        assert [o.name for o in listing.already_processed] == ["Ep001_Ada Lovelace.mp4"]
        assert [o.name for o in listing.ignored] == ["cover.png"]

    def test_keeps_listing_order(self, classifier, make_stored):
        names = ["c.mp4", "a.txt", "b.mp4"]
        listing = classifier.classify([make_stored(n, "video/mp4") for n in names])

        assert [o.name for o in listing.objects] == names

    def test_tags_every_object(self, classifier, make_stored):
        listing = classifier.classify([make_stored("a.mp4"), make_stored("b.bin", "x/y")])
        assert all(o.tag is not Classification.UNINSPECTED for o in listing.objects)

    @pytest.mark.parametrize(
        "mime", ["video/mp4", "text/plain", "application/pdf", GOOGLE_DOC, "image/png"]
    )
    def test_never_readmits_prefixed_objects(self, classifier, make_stored, mime):
        """A processed-prefix name is ALREADY_PROCESSED whatever its type."""
        listing = classifier.classify([make_stored("Ep002_Fred Vogelstein.x", mime)])

        assert listing.objects[0].tag is Classification.ALREADY_PROCESSED
        assert listing.unprocessed_media == []
        assert listing.candidate_transcripts == []

    def test_custom_prefix(self, make_stored):
        classifier = FileClassifier(ShowRunnerConfig(processed_prefix="DONE-"))
        listing = classifier.classify([make_stored("DONE-a.mp4"), make_stored("Ep1.mp4")])

        assert [o.name for o in listing.already_processed] == ["DONE-a.mp4"]
        assert [o.name for o in listing.unprocessed_media] == ["Ep1.mp4"]

    def test_skips_folders(self, classifier, make_stored):
        listing = classifier.classify([make_stored("sub", "inode/directory", is_folder=True)])
        assert listing.objects == []


class TestFindCompanionTranscript:
    """Tests for FileClassifier.find_companion_transcript."""

    def _listing(self, classifier, make_stored, entries):
        return classifier.classify([make_stored(n, m) for n, m in entries]).objects

    def test_finds_text_transcript(self, classifier, make_stored):
        objects = self._listing(
            classifier,
            make_stored,
            [("Fred Vogelstein.mp4", "video/mp4"), ("Fred Vogelstein.txt", "text/plain")],
        )

        found = classifier.find_companion_transcript(objects, "Fred Vogelstein")

        assert found.name == "Fred Vogelstein.txt"

    @pytest.mark.parametrize("mime", ["application/pdf", GOOGLE_DOC])
    def test_finds_pdf_and_docs(self, classifier, make_stored, mime):
        objects = self._listing(classifier, make_stored, [("fred vogelstein transcript", mime)])
        assert classifier.find_companion_transcript(objects, "Fred Vogelstein") is not None

    def test_name_must_contain_candidate(self, classifier, make_stored):
        objects = self._listing(classifier, make_stored, [("Vogelstein.txt", "text/plain")])
        assert classifier.find_companion_transcript(objects, "Fred Vogelstein") is None

    def test_first_in_listing_order(self, classifier, make_stored):
        objects = self._listing(
            classifier,
            make_stored,
            [("Fred Vogelstein v2.txt", "text/plain"), ("Fred Vogelstein.pdf", "application/pdf")],
        )

        found = classifier.find_companion_transcript(objects, "fred vogelstein")

        assert found.name == "Fred Vogelstein v2.txt"

    def test_ignores_non_transcript_types(self, classifier, make_stored):
        objects = self._listing(
            classifier,
            make_stored,
            [("Fred Vogelstein.mp4", "video/mp4"), ("Fred Vogelstein.png", "image/png")],
        )
        assert classifier.find_companion_transcript(objects, "Fred Vogelstein") is None

    def test_ignores_already_processed(self, classifier, make_stored):
        objects = self._listing(
            classifier, make_stored, [("Ep002_Fred Vogelstein_Transcript.txt", "text/plain")]
        )
        assert classifier.find_companion_transcript(objects, "Fred Vogelstein") is None

    def test_blank_candidate(self, classifier, make_stored):
        objects = self._listing(classifier, make_stored, [("notes.txt", "text/plain")])
        assert classifier.find_companion_transcript(objects, "  ") is None
