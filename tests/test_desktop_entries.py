"""Desktop descriptor scanning and icon table tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from desktop.desktop_entries import (
    DesktopEntry,
    application_dirs,
    build_icon_table,
    parse_desktop_file,
    scan_desktop_entries,
)


def write_desktop(directory: Path, name: str, body: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(body, encoding="utf-8")
    return path


FIREFOX = """[Desktop Entry]
Type=Application
Name=Firefox
Name[de]=Firefox Browser
Icon=firefox
StartupWMClass=firefox-esr
Exec=firefox %u

[Desktop Action new-window]
Name=New Window
"""


def test_parse_desktop_file(tmp_path: Path) -> None:
    entry = parse_desktop_file(write_desktop(tmp_path, "org.mozilla.firefox.desktop", FIREFOX))

    assert entry == DesktopEntry(
        name="Firefox",
        icon="firefox",
        wm_class="firefox-esr",
        desktop_id="org.mozilla.firefox",
    )


@pytest.mark.parametrize(
    "body",
    [
        "[Desktop Entry]\nName=Hidden\nIcon=x\nNoDisplay=true\n",
        "[Desktop Entry]\nName=Gone\nIcon=x\nHidden=True\n",
        "[Desktop Entry]\nName=No icon\n",
        "[Other Group]\nName=Wrong\nIcon=x\n",
        "garbage without header",
    ],
)
def test_skipped_desktop_files(tmp_path: Path, body: str) -> None:
    assert parse_desktop_file(write_desktop(tmp_path, "x.desktop", body)) is None


def test_earlier_directories_shadow_later(tmp_path: Path) -> None:
    user_dir = tmp_path / "home" / "applications"
    system_dir = tmp_path / "usr" / "applications"
    write_desktop(user_dir, "kitty.desktop", "[Desktop Entry]\nName=kitty\nIcon=kitty-custom\n")
    write_desktop(system_dir, "kitty.desktop", "[Desktop Entry]\nName=kitty\nIcon=kitty\n")
    write_desktop(system_dir, "foot.desktop", "[Desktop Entry]\nName=Foot\nIcon=foot\n")

    entries = scan_desktop_entries([user_dir, system_dir, tmp_path / "missing"])

    assert sorted((e.name, e.icon) for e in entries) == [("Foot", "foot"), ("kitty", "kitty-custom")]


def test_application_dirs_from_environment() -> None:
    dirs = application_dirs({"XDG_DATA_HOME": "/home/u/.local/share", "XDG_DATA_DIRS": "/a:/b"})

    assert dirs == [
        Path("/home/u/.local/share/applications"),
        Path("/a/applications"),
        Path("/b/applications"),
    ]


def test_icon_table_keys_are_lowercase_and_read_only() -> None:
    table = build_icon_table(
        [
            DesktopEntry(name="Firefox", icon="firefox", wm_class="firefox-esr", desktop_id="org.mozilla.firefox"),
            DesktopEntry(name="firefox", icon="other"),
        ]
    )

    assert table["firefox"] == "firefox"
    assert table["firefox-esr"] == "firefox"
    assert table["org.mozilla.firefox"] == "firefox"
    with pytest.raises(TypeError):
        table["new"] = "icon"  # type: ignore[index]


def test_unreadable_directory_is_skipped(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    broken_dir = tmp_path / "broken" / "applications"
    good_dir = tmp_path / "good" / "applications"
    write_desktop(broken_dir, "a.desktop", "[Desktop Entry]\nName=A\nIcon=a\n")
    write_desktop(good_dir, "foot.desktop", "[Desktop Entry]\nName=Foot\nIcon=foot\n")
    real_rglob = Path.rglob

    def rglob(self: Path, pattern: str):
        if self == broken_dir:
            raise PermissionError("denied")
        return real_rglob(self, pattern)

    monkeypatch.setattr(Path, "rglob", rglob)

    entries = scan_desktop_entries([broken_dir, good_dir])

    assert [(e.name, e.icon) for e in entries] == [("Foot", "foot")]
