# pyright: reportUnusedImport=false
from tableconf.config.loader import load_properties_file, save_properties_file
