from cargobay.builder.process_invoker import ProcessInvoker, ToolchainProcess
from cargobay.builder.message_parser import (
    DiagnosticChannel,
    MessageStreamParser,
    parse_message,
)
from cargobay.builder.artifact_correlator import ArtifactCorrelator
from cargobay.builder.error_classifier import BuildErrorClassifier, ErrorPattern
from cargobay.builder.test_discoverer import TestDiscoverer, parse_listing
from cargobay.builder.build_executor import BuildExecutor
from cargobay.builder.bin_compiler import BinaryCompiler
from cargobay.builder.test_compiler import TestCompiler

__all__ = [
    "ProcessInvoker",
    "ToolchainProcess",
    "DiagnosticChannel",
    "MessageStreamParser",
    "parse_message",
    "ArtifactCorrelator",
    "BuildErrorClassifier",
    "ErrorPattern",
    "TestDiscoverer",
    "parse_listing",
    "BuildExecutor",
    "BinaryCompiler",
    "TestCompiler",
]
