#!/usr/bin/env python3
"""Generate sample lease contracts for validation.

This script generates sample contracts and writes, for each one, its
effective JSON view, the document checklist of every party, the insurance
quote and the submission check results to the local/ folder.

Optionally resolves a CEP into the first contract's property address and
generates the narrative summary (requires GEMINI_API_KEY).
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lease_intake.config import LeaseIntakeConfig
from lease_intake.exceptions import LeaseIntakeError
from lease_intake.generators import LeaseContractGenerator
from lease_intake.integrations import CepClient, NarrativeGenerator
from lease_intake.logging import setup_logging
from lease_intake.models.lease import LeaseContract, PartyRole
from lease_intake.rules import (
    documents_for_person,
    format_checklist,
    is_submittable,
    property_documents,
    quote_for,
    validate_contract,
)
from lease_intake.sinks import contract_to_dict, quote_to_dict, strip_emphasis, to_dict, to_print_html
from lease_intake.store import ContractSession

logger = logging.getLogger(__name__)


def checklists(contract: LeaseContract) -> dict[str, Any]:
    """Document checklists for the property and every active party."""
    result: dict[str, Any] = {"property": format_checklist(property_documents())}
    for role in PartyRole:
        parties = contract.active_guarantors() if role == PartyRole.GUARANTOR else contract.parties(role)
        for index, person in enumerate(parties, start=1):
            docs = documents_for_person(person, role, contract.guarantee_type)
            result[f"{role.value} {index} - {person.name}"] = format_checklist(docs)
    return result


def contract_report(contract: LeaseContract) -> dict[str, Any]:
    """Everything derived from one contract, JSON-ready."""
    issues = validate_contract(contract)
    return {
        "contract": contract_to_dict(contract),
        "checklists": checklists(contract),
        "insurance_quote": quote_to_dict(quote_for(contract)),
        "validation": [to_dict(issue) for issue in issues],
        "submittable": is_submittable(contract),
    }


def save_json(data: list, filename: str, output_dir: Path, pretty: bool = True) -> None:
    """Save data to JSON file."""
    filepath = output_dir / filename
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2 if pretty else None, ensure_ascii=False)
    logger.info("Saved %d records to %s", len(data), filepath)


def main() -> None:
    """Generate sample contracts and their derived data."""
    config = LeaseIntakeConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate sample lease contracts")
    parser.add_argument(
        "--contracts",
        type=int,
        default=5,
        help="Number of contracts to generate (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed (default: SEED or 42)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=project_root / "local",
        help="Output folder (default: local/)",
    )
    parser.add_argument(
        "--cep",
        type=str,
        default=None,
        help="Resolve this CEP into the first contract's property address",
    )
    parser.add_argument(
        "--narrative",
        action="store_true",
        help="Generate the summary of the first contract with Gemini",
    )
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)

    output_dir: Path = args.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    logger.info("=" * 60)
    logger.info("Generating sample lease contracts")
    logger.info("=" * 60)
    logger.info("Contracts: %d", args.contracts)
    logger.info("Seed: %d", args.seed)

    generator = LeaseContractGenerator(seed=args.seed)
    contracts = list(generator.generate_batch(args.contracts))
    if not contracts:
        logger.warning("No contracts requested; nothing to do")
        return

    session = ContractSession(contract=contracts[0])
    if args.cep:
        try:
            with CepClient(config.address_lookup) as lookup:
                if session.fill_property_address(lookup, args.cep):
                    logger.info("Property address filled from CEP %s", args.cep)
                else:
                    logger.warning("CEP %s not found", args.cep)
        except LeaseIntakeError as e:
            logger.error("CEP lookup failed: %s", e)
        contracts[0] = session.contract

    reports = [contract_report(contract) for contract in contracts]
    save_json(reports, "contracts.json", output_dir, pretty=config.output.pretty_json)

    if args.narrative:
        try:
            summary = NarrativeGenerator(config.narrative).generate(session.contract)
        except LeaseIntakeError as e:
            logger.error("Summary not generated: %s", e)
            summary = None
        if summary:
            (output_dir / "summary.txt").write_text(strip_emphasis(summary), encoding="utf-8")
            (output_dir / "summary.html").write_text(to_print_html(summary), encoding="utf-8")
            logger.info("Summary saved to %s", output_dir)

    submittable = sum(1 for report in reports if report["submittable"])
    logger.info("=" * 60)
    logger.info("Submittable: %d of %d", submittable, len(reports))
    logger.info("All files saved to: %s", output_dir)
    logger.info("=" * 60)


if __name__ == "__main__":
    main()
