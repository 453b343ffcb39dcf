"""
Runs the full SWIG XML to LuaLS annotation transform for one input document.
"""

from pathlib import Path
from typing import Optional

from . import logger
from .config import GeneratorConfig
from .parsers import SwigXmlParser, ModelBuilder
from .parsers.items import NamespaceItem
from .result import GenerationReport
from .resolution import SymbolTables, TypeResolver
from .writers import LLSWriter


class LLSGenerator:
    """
    Parses one SWIG XML document, builds the symbol model and writes one
    annotation file per namespace.

    Problems with individual declarations never stop the run; they end up
    in the returned GenerationReport.
    """

    def __init__(self, xml_file: Path, config: Optional[GeneratorConfig] = None):
        self.xml_file = Path(xml_file)
        self.config = config or GeneratorConfig()
        self.module_name: Optional[str] = None
        self.root: Optional[NamespaceItem] = None

    def build_model(self, report: GenerationReport) -> NamespaceItem:
        parser = SwigXmlParser(self.xml_file, self.config)
        raw_root = parser.parse()
        self.module_name = parser.module_name
        for defect in parser.defects:
            report.add_defect(defect)

        self.root = ModelBuilder().build(raw_root)
        return self.root

    def run(self, output_dir: Optional[Path] = None) -> GenerationReport:
        output_dir = Path(output_dir) if output_dir is not None else self.config.output_dir
        logger.info(f"Generating annotations for {self.xml_file} into {output_dir}")

        report = GenerationReport()
        root = self.build_model(report)

        tables = SymbolTables.build(root)
        resolver = TypeResolver(tables, self.config)
        writer = LLSWriter(root, resolver, self.module_name, self.config, report)
        writer.write(output_dir)

        report.unresolved_types.update(resolver.unresolved)
        logger.info(f"Done: {len(report.files_written)} files, {report.resolved_count} overloads emitted, "
                    f"{len(report.skipped)} skipped, {len(report.unresolved_types)} unresolved types")
        return report
