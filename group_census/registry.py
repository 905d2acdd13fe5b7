import logging
import pathlib

import numpy as np

logger = logging.getLogger(__name__)

# ---------- utilities ----------
def _ensure_parent(p: str):
    parent = pathlib.Path(p).expanduser().resolve().parent
    parent.mkdir(parents=True, exist_ok=True)

# ---------- canonical-form registry ----------
class IsomorphismRegistry:
    """
    Append-only collection of canonical flattenings seen during one search.

    The registry owns copies of what it stores, so callers may keep reusing
    their working buffers after `add`.
    """

    def __init__(self):
        self.forms = []

    def __len__(self):
        return len(self.forms)

    def __iter__(self):
        return iter(self.forms)

    def __contains__(self, flat) -> bool:
        flat = np.asarray(flat)
        for stored in self.forms:
            if stored.shape == flat.shape and np.array_equal(stored, flat):
                return True
        return False

    def add(self, flat) -> bool:
        """Store `flat` if no equal form is present. Returns True iff it was new."""
        if flat in self:
            return False
        self.forms.append(np.array(flat, copy=True))
        return True

    def save(self, path: str, tables=None):
        """
        Export the stored canonical forms (and optionally the reported tables,
        in discovery order) to a compressed .npz.  Returns the path written.
        """
        if not path.endswith(".npz"):
            path = path + ".npz"
        _ensure_parent(path)
        arrays = {"canonical": np.array(self.forms, dtype=np.int64)}
        if tables is not None:
            arrays["tables"] = np.array(tables, dtype=np.int64)
        np.savez_compressed(path, **arrays)
        logger.info("Saved %d canonical forms to '%s'", len(self.forms), path)
        return path
