from wewe.net import find_arp_mac, get_default_gateway_mac, parse_default_gateway_ip

ROUTE_HEADER = "Iface\tDestination\tGateway \tFlags\tRefCnt\tUse\tMetric\tMask\t\tMTU\tWindow\tIRTT\n"
DEFAULT_ROUTE = "eth0\t00000000\t0101A8C0\t0003\t0\t0\t100\t00000000\t0\t0\t0\n"
LOCAL_ROUTE = "eth0\t0001A8C0\t00000000\t0001\t0\t0\t100\t00FFFFFF\t0\t0\t0\n"

ARP_HEADER = "IP address       HW type     Flags       HW address            Mask     Device\n"
MAC = "02:00:00:00:00:01"
ARP_ROW = f"192.168.1.1      0x1         0x2         {MAC}     *        eth0\n"
OTHER_ARP_ROW = "192.168.1.7      0x1         0x2         02:00:00:00:00:07     *        eth0\n"


def test_parse_default_gateway_ip():
    lines = [ROUTE_HEADER, LOCAL_ROUTE, DEFAULT_ROUTE]
    assert parse_default_gateway_ip(lines) == "192.168.1.1"


def test_parse_requires_gateway_flag():
    route = "eth0\t00000000\t0101A8C0\t0001\t0\t0\t100\t00000000\n"
    assert parse_default_gateway_ip([ROUTE_HEADER, route]) is None


def test_parse_without_default_route():
    assert parse_default_gateway_ip([ROUTE_HEADER, LOCAL_ROUTE]) is None


def test_parse_skips_short_lines():
    assert parse_default_gateway_ip(["eth0 00000000 0101A8C0\n", "\n"]) is None


def test_parse_first_default_wins():
    second = "wlan0\t00000000\t0100000A\t0003\t0\t0\t600\t00000000\n"
    lines = [ROUTE_HEADER, DEFAULT_ROUTE, second]
    assert parse_default_gateway_ip(lines) == parse_default_gateway_ip([DEFAULT_ROUTE])
    assert parse_default_gateway_ip(lines) != parse_default_gateway_ip([second])


def test_find_arp_mac():
    assert find_arp_mac([ARP_HEADER, OTHER_ARP_ROW, ARP_ROW], "192.168.1.1") == MAC


def test_find_arp_mac_skips_first_line():
    assert find_arp_mac([ARP_ROW], "192.168.1.1") is None


def test_find_arp_mac_needs_complete_row():
    truncated = f"192.168.1.1 0x1 0x2 {MAC} *\n"
    assert find_arp_mac([ARP_HEADER, truncated], "192.168.1.1") is None


def test_find_arp_mac_unknown_ip():
    assert find_arp_mac([ARP_HEADER, OTHER_ARP_ROW], "192.168.1.1") is None


def test_get_default_gateway_mac(tmp_path):
    route = tmp_path / "route"
    arp = tmp_path / "arp"
    route.write_text(ROUTE_HEADER + LOCAL_ROUTE + DEFAULT_ROUTE)
    arp.write_text(ARP_HEADER + OTHER_ARP_ROW + ARP_ROW)
    assert get_default_gateway_mac(route, arp) == MAC


def test_get_default_gateway_mac_no_arp_entry(tmp_path):
    route = tmp_path / "route"
    arp = tmp_path / "arp"
    route.write_text(ROUTE_HEADER + DEFAULT_ROUTE)
    arp.write_text(ARP_HEADER + OTHER_ARP_ROW)
    assert get_default_gateway_mac(route, arp) is None


def test_get_default_gateway_mac_missing_files(tmp_path):
    route = tmp_path / "route"
    route.write_text(ROUTE_HEADER + DEFAULT_ROUTE)
    assert get_default_gateway_mac(tmp_path / "missing", tmp_path / "arp") is None
    assert get_default_gateway_mac(route, tmp_path / "missing") is None


def test_get_default_gateway_mac_no_gateway(tmp_path):
    route = tmp_path / "route"
    arp = tmp_path / "arp"
    route.write_text(ROUTE_HEADER + LOCAL_ROUTE)
    arp.write_text(ARP_HEADER + ARP_ROW)
    assert get_default_gateway_mac(route, arp) is None