from PIL import Image

from pngsplit import read_png_bytes, split_file, write_split_files
from pngsplit.files import inspect_file, split_filename


def test_split_filename():
    assert split_filename("a/b.png", 3) == "a/b.png__split03.png"
    assert split_filename("a/b.png", 12, "out") == "out/b.png__split12.png"


def test_split_file(tmp_path, tall_png):
    source = tmp_path / "tall.png"
    source.write_bytes(tall_png)
    paths = split_file(str(source), 4)
    assert [p.rsplit("__", 1)[1] for p in paths] == [
        "split00.png",
        "split01.png",
        "split02.png",
    ]
    heights = []
    for path in paths:
        with Image.open(path) as img:
            heights.append(img.size[1])
    assert heights == [4, 4, 2]


def test_write_split_files_output_dir(tmp_path, small_png):
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    paths = write_split_files("small.png", [small_png, small_png], str(out_dir))
    assert sorted(p.name for p in out_dir.iterdir()) == [
        "small.png__split00.png",
        "small.png__split01.png",
    ]
    assert read_png_bytes(paths[1]) == small_png


def test_inspect_file(tmp_path, small_png):
    source = tmp_path / "small.png"
    source.write_bytes(small_png)
    lines = [str(line) for line in inspect_file(str(source))]
    assert "Scanlines Extracted: 4" in lines
