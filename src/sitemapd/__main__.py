from sitemapd.cli import main

main()
