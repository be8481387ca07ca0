import gzip

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402


VCF_HEADER = (
	"##fileformat=VCFv4.2\n"
	"##contig=<ID=1,length=248956422>\n"
	"#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\n"
)


def vcf_line(chrom, pos, ref, alt, vid="."):
	return f"{chrom}\t{pos}\t{vid}\t{ref}\t{alt}\t50\tPASS\t.\n"


@pytest.fixture
def write_vcf(tmp_path):
	"""Write header + body lines to a (optionally gzipped) VCF and return its path."""

	def _write(body_lines, name="input.vcf", header=VCF_HEADER):
		path = tmp_path / name
		text = header + "".join(body_lines)
		if name.endswith(".gz"):
			with gzip.open(path, "wt") as fh:
				fh.write(text)
		else:
			path.write_text(text)
		return path

	return _write
