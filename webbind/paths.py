import os


PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
BUNDLED_LIB_DIR = os.path.join(PACKAGE_DIR, "lib")
CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".webbind")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")
DOWNLOAD_DIR = os.path.join(CONFIG_DIR, "downloads")
