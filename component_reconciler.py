#!/usr/bin/env python3
import argparse
import os
import sys
from component_operator.services.component_reconciliation_service import ComponentReconciliationService
from component_operator.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def main():
    parser = argparse.ArgumentParser(description="Component Reconciler")
    parser.add_argument('--namespace', default=os.environ.get("COMPONENT_NAMESPACE", "default"), help='Namespace of the Component')
    parser.add_argument('--name', required=True, help='Name of the Component to reconcile')
    parser.add_argument('--dry-run', action='store_true', help='Run in dry-run mode without persisting any change')
    args = parser.parse_args()
    logger = setup_logger("ComponentReconciler")
    try:
        config_file = os.environ.get("OPERATOR_CONFIG_FILE", f"{ROOT_DIR}/operator-config.yaml")
        logger.info(f"Starting reconciliation of Component {args.namespace}/{args.name} with config file {config_file}")
        service = ComponentReconciliationService(args.namespace, args.name, config_file, dry_run=args.dry_run)
        outcome = service.run()
        logger.info(f"Reconciliation completed successfully: {outcome}")
        return 0
    except Exception as e:
        logger.error(f"Reconciliation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
