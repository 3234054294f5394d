from lve_exporter.cli import main

main()
