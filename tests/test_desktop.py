from deskentry.discovery import desktop_file_id, list_desktop_apps, parse_desktop_file, should_show
from deskentry.parser import parse


def write_desktop(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text.strip() + "\n", encoding="utf-8")
    return path


def test_desktop_file_id(tmp_path):
    assert desktop_file_id(tmp_path / "kde" / "foo.desktop", tmp_path) == "kde-foo.desktop"
    assert desktop_file_id(tmp_path / "foo.desktop", tmp_path) == "foo.desktop"


def test_parse_desktop_file(tmp_path):
    desktop = write_desktop(
        tmp_path / "sample.desktop",
        """
[Desktop Entry]
Type=Application
Name=Sample App
Name[de]=Beispiel
Exec=sample-app --flag %U
Comment=Runs the sample app
Icon=sample-icon
Keywords=demo;example;
Actions=new-window;undeclared;

[Desktop Action new-window]
Name=New Window
Exec=sample-app --new-window
""",
    )
    parsed = parse_desktop_file(desktop, current_desktops=[])
    assert parsed is not None
    assert parsed["name"] == "Sample App"
    assert parsed["comment"] == "Runs the sample app"
    assert parsed["icon"] == "sample-icon"
    assert parsed["keywords"] == ["demo", "example"]
    assert parsed["actions"] == ["new-window"]
    assert parsed["path"] == str(desktop)
    assert parsed["entry"].path == str(desktop)

    localized = parse_desktop_file(desktop, current_desktops=[], locale="de")
    assert localized["name"] == "Beispiel"
    assert localized["comment"] == "Runs the sample app"


def test_parse_desktop_file_ignores_non_apps(tmp_path):
    desktop = write_desktop(
        tmp_path / "link.desktop",
        """
[Desktop Entry]
Type=Link
Name=Not an app
URL=https://example.com
""",
    )
    assert parse_desktop_file(desktop, current_desktops=[]) is None


def test_parse_desktop_file_ignores_broken_files(tmp_path):
    desktop = write_desktop(tmp_path / "broken.desktop", "Name=No group header")
    assert parse_desktop_file(desktop, current_desktops=[]) is None
    assert parse_desktop_file(tmp_path / "missing.desktop", current_desktops=[]) is None


def test_should_show_hidden_and_no_display():
    for key in ["Hidden", "NoDisplay"]:
        entry = parse(f"[Desktop Entry]\nType=Application\nName=x\nExec=x\n{key}=true\n")
        assert not should_show(entry, [])


def test_should_show_requires_name_and_exec():
    assert not should_show(parse(b"[Desktop Entry]\nType=Application\nName=x\n"), [])
    assert not should_show(parse(b"[Desktop Entry]\nType=Application\nExec=x\n"), [])


def test_should_show_desktop_filters():
    only_gnome = parse(b"[Desktop Entry]\nType=Application\nName=x\nExec=x\nOnlyShowIn=GNOME;\n")
    assert should_show(only_gnome, ["ubuntu", "GNOME"])
    assert not should_show(only_gnome, ["KDE"])
    assert not should_show(only_gnome, [])

    not_kde = parse(b"[Desktop Entry]\nType=Application\nName=x\nExec=x\nNotShowIn=KDE;\n")
    assert should_show(not_kde, ["GNOME"])
    assert not should_show(not_kde, ["KDE"])


def test_should_show_try_exec(tmp_path):
    entry = parse(
        f"[Desktop Entry]\nType=Application\nName=x\nExec=x\nTryExec={tmp_path / 'missing'}\n"
    )
    assert not should_show(entry, [])

    program = tmp_path / "present"
    program.write_text("#!/bin/sh\n", encoding="utf-8")
    program.chmod(0o755)
    entry = parse(f"[Desktop Entry]\nType=Application\nName=x\nExec=x\nTryExec={program}\n")
    assert should_show(entry, [])


def test_list_desktop_apps(tmp_path, monkeypatch):
    monkeypatch.delenv("XDG_CURRENT_DESKTOP", raising=False)
    monkeypatch.setenv("LANG", "C")
    user_dir = tmp_path / "user" / "applications"
    system_dir = tmp_path / "system" / "applications"
    app = "[Desktop Entry]\nType=Application\nName={name}\nExec={name}\n"

    write_desktop(user_dir / "zeta.desktop", app.format(name="zeta"))
    write_desktop(user_dir / "hidden.desktop", app.format(name="hidden") + "Hidden=true\n")
    write_desktop(system_dir / "hidden.desktop", app.format(name="shadowed"))
    write_desktop(system_dir / "zeta.desktop", app.format(name="system-zeta"))
    write_desktop(system_dir / "kde" / "Alpha.desktop", app.format(name="Alpha"))
    write_desktop(system_dir / "notes.txt", "not a desktop file")

    apps = list_desktop_apps([user_dir, system_dir, tmp_path / "missing"])
    assert [item["name"] for item in apps] == ["Alpha", "zeta"]
    assert apps[1]["path"] == str(user_dir / "zeta.desktop")
