"""Default configuration for folder2txt."""

MAX_FILES = 1000

DEFAULT_LANG = "en"

IGNORE_FILE_NAME = "ignore.json"

LINE_COMMENT_PREFIX = "// File:"
BLOCK_COMMENT_PREFIX = "/* File:"
BLOCK_COMMENT_SUFFIX = "*/"

# Extensions that cannot carry a // comment
BLOCK_COMMENT_EXTENSIONS: frozenset[str] = frozenset(
    {".css", ".scss", ".sass", ".less", ".json"}
)

DEFAULT_IGNORE_FOLDERS: tuple[str, ...] = (
    # Version Control
    ".git", ".svn", ".hg", ".bzr",
    # Dependencies
    "node_modules", "bower_components", "jspm_packages",
    # Build outputs
    ".next", ".nuxt", ".output", "dist", "build", "coverage",
    ".cache", ".parcel-cache", ".turbo", ".vercel",
    # Python
    "__pycache__", ".venv", "venv", ".pytest_cache", ".mypy_cache",
    ".ruff_cache", ".tox", "*.egg-info",
    # IDEs
    ".idea", ".vscode",
)

DEFAULT_IGNORE_FILES: tuple[str, ...] = (
    # OS
    ".DS_Store", "Thumbs.db", "desktop.ini",
    # Logs & lock files
    "*.log", "package-lock.json", "yarn.lock", "pnpm-lock.yaml",
    # Compiled
    "*.pyc", "*.pyo", "*.class", "*.jar",
    # Binary assets
    "*.png", "*.jpg", "*.jpeg", "*.gif", "*.ico", "*.pdf", "*.zip",
    # Editors
    "*.swp", "*.swo",
)

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "Starting writing output file": "Starting writing output file",
        "Writing file": "Writing file",
        "Finished writing output file": "Finished writing output file",
        "The number of files exceeds the limit of": "The number of files exceeds the limit of",
        "Usage": "Usage: folder2txt folder=<folder path> output=<output file path> [lang=<en|fr|es|de>]",
    },
    "fr": {
        "Starting writing output file": "Début de l'écriture du fichier de sortie",
        "Writing file": "Écriture du fichier",
        "Finished writing output file": "Fin de l'écriture du fichier de sortie",
        "The number of files exceeds the limit of": "Le nombre de fichiers dépasse la limite de",
        "Usage": "Utilisation : folder2txt folder=<dossier> output=<fichier de sortie> [lang=<en|fr|es|de>]",
    },
    "es": {
        "Starting writing output file": "Comenzando a escribir el archivo de salida",
        "Writing file": "Escribiendo archivo",
        "Finished writing output file": "Terminó de escribir el archivo de salida",
        "The number of files exceeds the limit of": "El número de archivos excede el límite de",
        "Usage": "Uso: folder2txt folder=<carpeta> output=<archivo de salida> [lang=<en|fr|es|de>]",
    },
    "de": {
        "Starting writing output file": "Beginne mit dem Schreiben der Ausgabedatei",
        "Writing file": "Schreibe Datei",
        "Finished writing output file": "Ausgabedatei fertig geschrieben",
        "The number of files exceeds the limit of": "Die Anzahl der Dateien überschreitet das Limit von",
        "Usage": "Verwendung: folder2txt folder=<Ordner> output=<Ausgabedatei> [lang=<en|fr|es|de>]",
    },
}
