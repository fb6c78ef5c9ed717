import pytest

from fchat.logresources import (
    LinkKind,
    ResourceCache,
    cache_directory,
    classify_link,
    find_resource_urls,
)

EICON = "https://static.f-list.net/images/eicon/wave.gif"
AVATAR = "https://static.f-list.net/images/avatar/someone.png"
GIF = b"GIF89a" + b"\x00" * 10
PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 10


def test_classify_profile_strips_trailing_slash():
    assert classify_link("https://www.f-list.net/c/Some Name/") == (LinkKind.PROFILE, "Some Name")


def test_classify_profile_without_slash():
    assert classify_link("https://www.f-list.net/c/Alpha") == (LinkKind.PROFILE, "Alpha")


@pytest.mark.parametrize(
    "link, expected",
    [
        ("#AHI-abc123", (LinkKind.CHANNEL, "abc123")),
        ("#CSA-42", (LinkKind.REPORT, "42")),
        ("", (LinkKind.NONE, "")),
        ("https://example.com/x", (LinkKind.OTHER, "")),
    ],
)
def test_classify_other_kinds(link, expected):
    assert classify_link(link) == expected


def test_find_resource_urls_finds_icons():
    text = (
        f'hi <img class="eicon" src="{EICON}" title="w"/> and '
        f'<img class="icon" src="{AVATAR}"/>'
    )
    assert find_resource_urls(text) == [EICON, AVATAR]


def test_find_resource_urls_ignores_other_images():
    text = '<img src="https://example.com/a.png"/> <img class="eicon" src="https://example.com/b.png"/>'
    assert find_resource_urls(text) == []


def test_cache_directory_by_kind(tmp_path):
    assert cache_directory(EICON, tmp_path) == tmp_path / "eicon"
    assert cache_directory(AVATAR, tmp_path) == tmp_path / "avatar"
    assert cache_directory("https://example.com/x.png", tmp_path) == tmp_path
    assert (tmp_path / "eicon").is_dir()


def test_store_writes_file_and_tracks_gif(tmp_path):
    cache = ResourceCache(tmp_path)
    path = cache.store(EICON, GIF)
    assert path == tmp_path / "eicon" / "wave.gif"
    assert path.read_bytes() == GIF
    assert cache.is_loaded(EICON)
    assert cache.animations == [EICON]


def test_store_still_image_kept_in_memory(tmp_path):
    cache = ResourceCache(tmp_path)
    cache.store(AVATAR, PNG)
    assert cache.images == {AVATAR: PNG}
    assert cache.animations == []


def test_store_does_not_overwrite_loaded(tmp_path):
    cache = ResourceCache(tmp_path)
    cache.store(AVATAR, PNG)
    path = cache.store(AVATAR, b"other")
    assert path.read_bytes() == PNG


def test_request_resources_fetches_once(tmp_path):
    calls = []

    def fetcher(url):
        calls.append(url)
        return GIF

    cache = ResourceCache(tmp_path, fetcher)
    text = f'<img class="eicon" src="{EICON}"/>'
    assert cache.request_resources(text) == [EICON]
    assert cache.request_resources(text) == []
    assert calls == [EICON]


def test_request_resources_skips_failures(tmp_path):
    def fetcher(url):
        raise OSError("down")

    cache = ResourceCache(tmp_path, fetcher)
    assert cache.request_resources(f'<img class="eicon" src="{EICON}"/>') == []
    assert not cache.is_loaded(EICON)