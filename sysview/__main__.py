from sysview.web.server import main

main()
