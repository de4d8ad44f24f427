import sys
from pathlib import Path

FS_IMAGES = ("$BUILD_DIR/littlefs.bin", "$BUILD_DIR/spiffs.bin")


def project_config(env):
    # custom_gzip_extensions = .html, .css  (commas or one per line)
    option = env.GetProjectOption("custom_gzip_extensions", "")
    extensions = [ext.strip() for ext in option.replace("\n", ",").split(",") if ext.strip()]
    if not extensions:
        return {}
    return {"gzip": {"extensions": extensions}}


def register(env):
    from site_gzip import DirectorySite, compress_site

    site = DirectorySite(env.subst("$PROJECT_DATA_DIR"), project_config(env))

    def before_buildfs(source, target, env):
        written = compress_site(site)
        print(f"[gzip_fs] Compressed {len(written)} files in {site.dest}")

    for image in FS_IMAGES:
        env.AddPreAction(image, before_buildfs)


def main(root, argv=None):
    from site_gzip import compress_directory

    argv = sys.argv[1:] if argv is None else argv
    data_dir = Path(argv[0]) if argv else root / "data"
    if not data_dir.exists():
        print(f"[gzip_fs] {data_dir} not found, nothing to compress")
        return
    written = compress_directory(data_dir)
    print(f"[gzip_fs] Compressed {len(written)} files in {data_dir}")


if __name__ == "__main__":
    ROOT = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(ROOT))
    main(ROOT)
else:
    # SCons runs extra scripts without __file__; the project dir comes from env
    from SCons.Script import Import

    Import("env")
    sys.path.insert(0, env.subst("$PROJECT_DIR"))  # noqa: F821
    register(env)  # noqa: F821
