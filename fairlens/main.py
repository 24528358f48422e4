"""Main entry point for the fairness core"""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables FIRST, before any other imports
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

from fairlens.constants import RiskFilter
from fairlens.orchestrator.dashboard import FairnessDashboard
from fairlens.sources import get_data_source
from fairlens.utils.config_loader import load_config, get_section
from fairlens.utils.errors import ConfigurationError, DataUnavailable, InvalidRecord
from fairlens.utils.logging import get_logger, set_log_level

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build fairness and fraud reports for a customer")
    parser.add_argument("--user-id", required=True, help="Customer ID to report on")
    parser.add_argument(
        "--risk-filter",
        default=RiskFilter.ALL.value,
        choices=[f.value for f in RiskFilter],
        help="Risk level shown in the filtered alert list"
    )
    parser.add_argument("--config", default=None, help="Path to YAML configuration")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        if not os.getenv("LOG_LEVEL"):
            set_log_level(get_section(config, "logging")["level"])
        dashboard = FairnessDashboard(get_data_source(config), config)

        decision_report = dashboard.build_decision_report(args.user_id)
        fraud_report = dashboard.build_fraud_report(args.user_id, args.risk_filter)

    except ConfigurationError as e:
        logger.error(f"Configuration problem: {e}")
        return 2
    except DataUnavailable as e:
        logger.error(f"Failed to load dashboard data: {e}")
        return 1
    except InvalidRecord as e:
        logger.error(f"Dashboard data is invalid: {e}")
        return 1

    logger.info("=" * 60)
    logger.info("FAIRNESS SUMMARY")
    logger.info("=" * 60)
    logger.info(f"Fairness Score: {decision_report.fairness.score} ({decision_report.fairness.label.value})")
    logger.info(f"Decisions: {decision_report.stats.total_decisions} across {decision_report.stats.banks_count} banks")
    logger.info(
        f"Bias Breakdown: HIGH={decision_report.risk_breakdown.high} "
        f"MEDIUM={decision_report.risk_breakdown.medium} LOW={decision_report.risk_breakdown.low}"
    )
    for bank in decision_report.banks:
        logger.info(
            f"Bank {bank.bank_name or '(unknown)'}: approved={bank.approved_count} "
            f"denied={bank.denied_count} pending={bank.pending_count}"
        )
    logger.info(
        f"Fraud Alerts: {fraud_report.summary.total_alerts} total, "
        f"{fraud_report.summary.high_risk_count} high risk, {fraud_report.summary.blocked_count} blocked"
    )
    logger.info(f"Showing {len(fraud_report.filtered_alerts)} alerts for filter {fraud_report.risk_filter.value}")
    logger.info("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
