"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large device tree source (~2000 nodes)."""
    sections = ['/dts-v1/;\n#include "soc.dtsi"\n\n/ {\n\t#address-cells = <1>;\n\t#size-cells = <1>;\n']
    for i in range(2000):
        sections.append(f"""
\t/* peripheral {i} */
\tserial{i}: serial@{0x10000000 + i * 0x1000:x} {{
\t\tcompatible = "vendor,uart-{i}", "ns16550a";
\t\treg = <0x{0x10000000 + i * 0x1000:x} 0x1000>;
\t\tinterrupts = <{i % 64}>;
\t\tclocks = <&clk{i % 4}>;
\t\tstatus = "okay";
\t}};
""")
    sections.append("};\n")
    return "".join(sections)
