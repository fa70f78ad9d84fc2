"""Aggregate artifact generation."""

import sys

from tqdm import tqdm

from folder2txt.file_operations import count_files, header_path, iter_files, read_text
from folder2txt.headers import has_header, make_header
from folder2txt.models import ArchiveSettings
from folder2txt.sanitize import clean_content


def render_file(content: str, relative_path: str) -> str:
    """Render one file as a segment of the aggregate artifact.

    A header is only added when the content does not already start with one.

    Examples:
        >>> render_file("const x = 1;", "src/a.js")
        '// File: src/a.js\\nconst x = 1;\\n'
        >>> render_file("// File: src/a.js\\nconst x = 1;", "src/a.js")
        '// File: src/a.js\\nconst x = 1;\\n'
    """
    segment = "" if has_header(content) else make_header(relative_path) + "\n"
    return segment + content + "\n"


def archive(settings: ArchiveSettings) -> bool:
    """Write every non-ignored file under ``settings.folder`` into one artifact.

    Args:
        settings: Folder, output, locale, ceiling and ignore rules of the run

    Returns:
        True if the artifact was written, False if the folder holds more files
        than ``settings.limit`` (nothing is written in that case)

    Raises:
        OSError: If the folder cannot be walked or a file cannot be read,
            or the output cannot be written
    """
    messages = settings.messages
    skip = (settings.output,)

    files_count = count_files(settings.folder, settings.rules, settings.limit, skip)
    if files_count > settings.limit:
        print(
            f"({files_count}) {messages['The number of files exceeds the limit of']} "
            f"{settings.limit}",
            file=sys.stderr,
        )
        return False

    print(f"{messages['Starting writing output file']} {settings.output}")
    settings.output.parent.mkdir(parents=True, exist_ok=True)

    with open(settings.output, "w", encoding="utf-8", newline="") as out:
        with tqdm(total=files_count, desc="Archiving", unit="file") as pbar:
            for file_path in iter_files(settings.folder, settings.rules, skip):
                tqdm.write(f"{messages['Writing file']} {file_path}")

                content = read_text(file_path)
                if settings.clean:
                    content = clean_content(content)

                out.write(render_file(content, header_path(file_path)))
                pbar.update(1)

    print(f"{messages['Finished writing output file']} {settings.output}")
    return True
