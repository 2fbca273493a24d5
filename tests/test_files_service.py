import pytest

from reqtrail.files_service import FileService


@pytest.fixture
def service(tmp_path):
    return FileService(tmp_path / "config", tmp_path / "data", tmp_path / "temp")


def test_get_or_create_data_file_creates_empty_file_and_parents(service, tmp_path):
    path = service.get_or_create_data_file("nested/deep/file.json")
    assert path == tmp_path / "data" / "nested" / "deep" / "file.json"
    assert path.is_file()
    assert path.read_text() == ""


def test_get_or_create_keeps_existing_content(service):
    path = service.get_or_create_config_file("settings")
    path.write_text("kept")
    again = service.get_or_create_config_file("settings")
    assert again == path
    assert again.read_text() == "kept"


def test_temp_file_lives_under_temp_root(service, tmp_path):
    path = service.get_or_create_temp_file("scratch")
    assert path.parent == tmp_path / "temp"
    assert path.exists()


def test_find_all_data_files_skips_directories(service, tmp_path):
    a = service.get_or_create_data_file("a")
    b = service.get_or_create_data_file("b")
    service.get_or_create_data_file("sub/c")
    assert set(service.find_all_data_files()) == {a, b}


def test_find_all_data_files_in_folders(service):
    inner = service.get_or_create_data_file("one/two/x")
    service.get_or_create_data_file("one/y")
    assert service.find_all_data_files_in_folders(["one", "two"]) == [inner]


def test_find_in_missing_folder_raises(service, tmp_path):
    (tmp_path / "data").mkdir()
    with pytest.raises(FileNotFoundError):
        service.find_all_data_files_in_folders(["nope"])


def test_remove_data_file(service):
    path = service.get_or_create_data_file("gone")
    service.remove_data_file("gone")
    assert not path.exists()


def test_remove_missing_file_raises(service):
    with pytest.raises(FileNotFoundError):
        service.remove_temp_file("never-created")


def test_rename_data_file_moves_content(service):
    source = service.get_or_create_data_file("old")
    source.write_text("payload")
    service.rename_data_file("old", "new")
    assert not source.exists()
    assert (source.parent / "new").read_text() == "payload"


def test_rename_temp_file_replaces_target(service):
    first = service.get_or_create_temp_file("first")
    first.write_text("winner")
    second = service.get_or_create_temp_file("second")
    second.write_text("loser")
    service.rename_temp_file("first", "second")
    assert second.read_text() == "winner"
    assert not first.exists()


def test_saved_request_lives_in_collection_folder(service, tmp_path):
    path = service.get_or_create_saved_request_file("login")
    assert path == tmp_path / "data" / "collection" / "login"
    assert path.is_file()


def test_saved_request_lifecycle(service):
    service.get_or_create_saved_request_file("alpha")
    beta = service.get_or_create_saved_request_file("beta")
    beta.write_text("body")
    names = {p.name for p in service.find_all_saved_request_files()}
    assert names == {"alpha", "beta"}

    service.rename_saved_request_file("beta", "gamma")
    names = {p.name for p in service.find_all_saved_request_files()}
    assert names == {"alpha", "gamma"}
    assert service.get_or_create_saved_request_file("gamma").read_text() == "body"

    service.remove_saved_request_file("alpha")
    assert [p.name for p in service.find_all_saved_request_files()] == ["gamma"]


def test_remove_missing_saved_request_raises(service):
    service.get_or_create_saved_request_file("exists")
    with pytest.raises(FileNotFoundError):
        service.remove_saved_request_file("missing")