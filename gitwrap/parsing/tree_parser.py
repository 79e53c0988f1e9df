"""Parser for `git ls-tree` listings."""

from gitwrap.exceptions import MalformedOutputError
from gitwrap.models.records import ObjectType, TreeEntry
from gitwrap.parsing.base import record_lines

# git prints gitlinks (submodules) with the object type "commit"
_TYPE_TOKENS = {
    "blob": ObjectType.BLOB,
    "tree": ObjectType.TREE,
    "submodule": ObjectType.SUBMODULE,
    "commit": ObjectType.SUBMODULE,
}


class TreeParser:
    """Parse `<mode> <type> <hash>\\t<path>` lines into TreeEntries."""

    def parse(self, output: str) -> list[TreeEntry]:
        entries = []
        for number, line in record_lines(output):
            meta, tab, path = line.partition("\t")
            if not tab:
                raise MalformedOutputError("Missing tab before path", line, number)

            fields = meta.split(" ")
            if len(fields) != 3:
                raise MalformedOutputError(
                    f"Expected mode, type and hash, got {len(fields)} fields",
                    line,
                    number,
                )
            mode, type_token, hash_ = fields

            object_type = _TYPE_TOKENS.get(type_token)
            if object_type is None:
                raise MalformedOutputError(
                    f"Unknown object type '{type_token}'", line, number
                )

            entries.append(
                TreeEntry(
                    mode=mode,
                    type=object_type,
                    hash=hash_,
                    path=path,
                    sort_key=f"{object_type.priority}:{path}",
                )
            )
        return entries
