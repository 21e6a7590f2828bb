"""Re-tokenize only what changed — stop at the fixed point."""

from dtslex import TokenizedDocument
from dtslex.profiling import profiled_retokenize

source = """\
/dts-v1/;

/ {
\tmodel = "Example Board";
\tmemory@80000000 {
\t\treg = <0x80000000 0x8000000>;
\t};
\t/* cpus are described in soc.dtsi */
\tchosen {
\t\tstdout-path = &uart0;
\t};
};"""

doc = TokenizedDocument(source)

with profiled_retokenize() as metrics:
    # Typing "/*" at the start of line 3 comments out everything up to the
    # "*/" on line 7, where the state stream converges again.
    updated = doc.apply_text_edit(3, 1, 3, 1, "/* ")

print("Lines re-tokenized:", sorted(updated))
print("Exit states:", [doc.exit_state(i).top.name for i in range(len(doc))])
print("Metrics:", metrics.summary())

with profiled_retokenize() as metrics:
    updated = doc.apply_text_edit(3, 1, 3, 4, "")

print("After undo:", sorted(updated), metrics.summary()["lines_scanned"], "lines scanned")
