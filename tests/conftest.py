import logging
import pytest
from pathlib import Path

TEST_DATA_DIR = Path(__file__).parent / "test_data" / "input"
TETRAPEPTIDE_PDB = TEST_DATA_DIR / "tetrapeptide.pdb"
CA_ONLY_PDB = TEST_DATA_DIR / "ca_only.pdb"

ATOM_LINE = "ATOM  {serial:5d}  {atom:<3s} {res:>3s} A{seq:4d}    {x:8.3f}{y:8.3f}{z:8.3f}  1.00  0.00           {element:>2s}\n"


def atom_line(serial, atom, res, seq, x, y, z):
    """Fixed-width PDB ATOM record."""
    return ATOM_LINE.format(
        serial=serial, atom=atom, res=res, seq=seq, x=x, y=y, z=z, element=atom[0]
    )


@pytest.fixture
def write_structure(tmp_path):
    """Write a structure file from a title and a list of record lines."""

    def _write(records, title="TITLE     TEST STRUCTURE", name="structure.pdb"):
        path = tmp_path / name
        path.write_text(title + "\n" + "".join(records))
        return str(path)

    return _write


@pytest.fixture
def tetrapeptide_pdb():
    return str(TETRAPEPTIDE_PDB)


@pytest.fixture
def ca_only_pdb():
    return str(CA_ONLY_PDB)


@pytest.fixture
def make_atom():
    return atom_line


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI installs so they do not leak between tests."""
    yield
    logger = logging.getLogger("ljprobe")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
