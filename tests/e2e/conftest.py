import stat

import pytest


@pytest.fixture
def fake_tool_factory(tmp_path):
    """
    Factory para crear ejecutables de shell que simulan herramientas externas.
    Permite probar el runner real (subprocess) sin cargo ni red.
    """

    def _create_tool(name: str, body: str):
        bin_dir = tmp_path / "fake_bin"
        bin_dir.mkdir(exist_ok=True)
        tool = bin_dir / name
        tool.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        tool.chmod(tool.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return tool

    return _create_tool
