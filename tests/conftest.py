import os

import pytest


@pytest.fixture
def site_dir(tmp_path):
    """A built site with a mix of compressible and binary assets."""
    files = {
        "index.html": b"<html><body>" + b"hello " * 200 + b"</body></html>",
        "css/app.css": b"body { color: #333; }\n" * 50,
        "js/app.min.js": b"console.log('ready');\n" * 50,
        "img/logo.png": b"\x89PNG\r\n\x1a\n" + bytes(range(256)),
        "empty.txt": b"",
    }
    for name, data in files.items():
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        os.utime(path, (1_600_000_000, 1_600_000_000))
    return tmp_path


class FakeFile:
    def __init__(self, name):
        self.name = name

    def destination(self, root):
        return os.path.join(root, self.name)


class FakeSite:
    def __init__(self, dest, names, config=None):
        self.dest = str(dest)
        self.config = config or {}
        self.names = names

    def each_site_file(self):
        return [FakeFile(name) for name in self.names]


@pytest.fixture
def fake_site(site_dir):
    return FakeSite(site_dir, ["index.html", "css/app.css", "img/logo.png"])
