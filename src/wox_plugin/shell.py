import os
import subprocess
import sys
import webbrowser


def open_url(url: str) -> bool:
    return webbrowser.open(url)


def open_folder(path: str) -> None:
    if sys.platform == "win32":
        os.startfile(path)  # type: ignore[attr-defined]
    elif sys.platform == "darwin":
        subprocess.run(["open", path], check=False)
    else:
        subprocess.run(["xdg-open", path], check=False)
