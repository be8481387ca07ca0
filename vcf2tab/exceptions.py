"""Exception types raised by the vcf2tab conversion pipeline.

Library code raises these and lets them propagate; only the command line
front-end turns them into log messages and exit codes.
"""

from typing import Optional

__all__ = ["Vcf2TabError", "MalformedRecordError", "InvalidPositionError"]


class Vcf2TabError(Exception):
	"""Base class for all conversion errors."""


class MalformedRecordError(Vcf2TabError, ValueError):
	"""A data line cannot be interpreted as a VCF record.

	``line_no`` is the 1-based physical line number in the input (None when
	the record did not come from a file).
	"""

	def __init__(self, message: str, line_no: Optional[int] = None):
		self.line_no = line_no
		if line_no is not None:
			message = f"line {line_no}: {message}"
		super().__init__(message)


class InvalidPositionError(MalformedRecordError):
	"""POS column is not a non-negative integer."""
