import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent
PY_FILES = [
    "webbind/__init__.py",
    "webbind/bridge.py",
    "webbind/cli.py",
    "webbind/errors.py",
    "webbind/runtime_download.py",
    "webbind/webview.py",
    "webbind/infra/config_store.py",
    "webbind/native/library.py",
    "webbind/native/marshal.py",
    "webbind/native/runtime.py",
    "webbind/native/structs.py",
    "webbind/native/version.py",
]


def run(cmd):
    print("> " + " ".join(cmd))
    result = subprocess.run(cmd, cwd=ROOT)
    if result.returncode != 0:
        raise SystemExit(result.returncode)


def main():
    run([sys.executable, "-m", "py_compile", *PY_FILES])
    run([sys.executable, "-c", "import webbind, webbind.cli; print('imports ok')"])
    run([sys.executable, "-m", "pytest", "-q"])
    print("All automated checks passed.")


if __name__ == "__main__":
    main()
