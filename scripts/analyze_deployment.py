#!/usr/bin/env python3
"""
Offline coverage report for a camera deployment.

Usage:
    python scripts/analyze_deployment.py                     # default deployment
    python scripts/analyze_deployment.py -d riihimaki -v     # per-checkpoint detail
    python scripts/analyze_deployment.py coverage.max_workers=4
"""
import argparse
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.config.manager import ConfigManager
from src.common.logging import configure_logging
from src.surveillance.application.builder import SurveillanceApplicationBuilder

def main():
    parser = argparse.ArgumentParser(description="Perimeter coverage analysis for a deployment")
    parser.add_argument('-d', '--deployment', default=None, help="Deployment name under conf/deployment")
    parser.add_argument('-v', '--verbose', action='store_true', help="Print covering cameras per checkpoint")
    args, overrides = parser.parse_known_args()

    manager = ConfigManager()
    cfg = manager.load_app_config(overrides)
    configure_logging(cfg.logging.level)
    builder = (
        SurveillanceApplicationBuilder(cfg, manager)
        .build_repositories()
        .seed(args.deployment)
        .build_analyzer()
        .build_services()
    )
    service = builder.coverage_service
    sensors = service.sensors()
    report = service.report(sensors)

    print("=" * 60)
    print(f"Deployment: {args.deployment or cfg.deployment}")
    print(f"Cameras:    {sum(1 for s in sensors if s.operational)}/{len(sensors)} active")
    print("=" * 60)

    if not report.is_classified:
        print("Perimeter needs at least 3 checkpoints; nothing to analyze.")
        return 0

    print(f"Status:        {report.status.value.upper()}")
    print(f"Coverage:      {report.coverage_percent:.1f}%")
    print(f"Redundancy:    {report.redundancy_percent:.1f}%")
    print(f"Secured:       {report.redundant_points}/{report.total_points}")
    print(f"Single cover:  {report.vulnerable_points}")
    print(f"Blind spots:   {report.blind_spots}")

    if args.verbose:
        print("-" * 60)
        for i, pc in enumerate(service.point_details(), start=1):
            cams = ", ".join(pc.camera_ids) or "-"
            print(f"  #{i} ({pc.point.latitude:.4f}, {pc.point.longitude:.4f}): {cams}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
