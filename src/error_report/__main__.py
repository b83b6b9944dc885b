from error_report.cli import main

main()
