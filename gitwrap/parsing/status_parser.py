"""Parser for `--name-status` style output."""

from gitwrap.exceptions import MalformedOutputError
from gitwrap.models.records import ChangeRecord
from gitwrap.parsing.base import record_lines


class StatusParser:
    """
    Parse `<status><whitespace><filename>` lines into ChangeRecords.

    Lines are split once on the first run of whitespace. Renames and copies
    (`R100<TAB>old<TAB>new`) therefore keep both paths in `filename`, and
    filenames that begin with whitespace are not supported.
    """

    def parse(self, output: str) -> list[ChangeRecord]:
        changes = []
        for number, line in record_lines(output):
            fields = line.split(None, 1)
            if len(fields) != 2:
                raise MalformedOutputError(
                    "Expected a status code and a filename", line, number
                )
            status, filename = fields
            changes.append(ChangeRecord(status=status, filename=filename))
        return changes
