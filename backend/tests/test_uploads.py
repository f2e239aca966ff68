import io
import os

from werkzeug.datastructures import FileStorage

from stockroom import create_app
from stockroom.services import upload_service


class TestUploadFolder:
    def test_created_at_startup(self, tmp_path):
        folder = tmp_path / "fresh" / "uploads"

        create_app({
            'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
            'UPLOAD_FOLDER': str(folder),
        })

        assert folder.is_dir()

    def test_ensure_is_idempotent(self, tmp_path):
        folder = str(tmp_path / "uploads")

        upload_service.ensure_upload_folder(folder)
        upload_service.ensure_upload_folder(folder)

        assert os.path.isdir(folder)


class TestFilenames:
    def test_extension_of(self):
        assert upload_service.extension_of("photo.JPG") == ".JPG"
        assert upload_service.extension_of("archive.tar.gz") == ".gz"
        assert upload_service.extension_of("noext") == ""
        assert upload_service.extension_of("../../etc/passwd") == ""
        assert upload_service.extension_of("C:\\pics\\shot.png") == ".png"
        assert upload_service.extension_of(None) == ""

    def test_name_is_millis_plus_extension(self, tmp_path, monkeypatch):
        monkeypatch.setattr(upload_service, "epoch_millis", lambda: 1700000000123)

        assert upload_service.unique_filename(str(tmp_path), "a.png") == "1700000000123.png"

    def test_same_millisecond_is_bumped(self, tmp_path, monkeypatch):
        monkeypatch.setattr(upload_service, "epoch_millis", lambda: 1700000000123)
        (tmp_path / "1700000000123.png").write_bytes(b"taken")
        (tmp_path / "1700000000124.png").write_bytes(b"taken")

        assert upload_service.unique_filename(str(tmp_path), "b.png") == "1700000000125.png"


class TestSaveUpload:
    def test_writes_verbatim(self, app, upload_dir):
        payload = b"\x00\x01not really an image"
        storage = FileStorage(stream=io.BytesIO(payload), filename="thing.bin")

        url = upload_service.save_upload(storage)

        assert url.startswith("/uploads/") and url.endswith(".bin")
        assert (upload_dir / os.path.basename(url)).read_bytes() == payload
        assert upload_service.path_for(url) == str(upload_dir / os.path.basename(url))

    def test_no_file(self, app):
        assert upload_service.save_upload(None) is None
        assert upload_service.save_upload(FileStorage(stream=io.BytesIO(b""), filename="")) is None
