#!/usr/bin/env python3
"""Mock-location hiding hooks - attach report and detection simulation.

This module provides the library entry points and can be used as:
1. Library: Import functions like attach_process(), simulate_detection(), scan_apk()
2. CLI: Run directly or via cli.py
"""
import sys
import os
import argparse

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from mock_hider.colors import warn, error, info, success, dim, bold, header, outcome
from mock_hider.config import hide_config
from mock_hider.driver import RegistrationDriver
from mock_hider.engine import AttachReport
from mock_hider.host import HookRegistry
from mock_hider.hooks import (
    RULE_TABLE, get_rule, find_rule,
    HOOKED_CLASSES, create_mock_for_class, create_cell_location, provider_list,
)
from mock_hider import surfaces
from mock_hider.types import CallArg
from mock_hider.utils import set_verbose, log, debug_log, format_value

from androguard.misc import AnalyzeAPK


def build_trace_map(em):
    """Build PC -> (instruction_string, instruction_length) map."""
    trace_map = {}
    code = em.get_code()
    if code:
        bc = code.get_bc()
        pc = 0
        for ins in bc.get_instructions():
            trace_map[pc] = (ins.get_name() + " " + ins.get_output(), ins.get_length())
            pc += ins.get_length()
    return trace_map


def find_surface_references(dx):
    """Find every call site in the app that invokes an intercepted surface.

    Returns:
        List of {'signature', 'caller', 'pc', 'instr'} sorted by caller + PC
    """
    refs = []
    for m in dx.get_methods():
        if m.is_external():
            continue
        em = m.get_method()
        if not em.get_code():
            continue

        caller_name = f"{em.get_class_name()}->{em.get_name()}"
        for pc, (instr_str, instr_len) in build_trace_map(em).items():
            if "invoke" not in instr_str:
                continue
            rule = find_rule(instr_str)
            if rule:
                refs.append({
                    'signature': rule.signature,
                    'caller': caller_name,
                    'pc': pc,
                    'instr': instr_str,
                })

    # Sort by caller name + PC for consistent ordering
    refs.sort(key=lambda x: (x['caller'], x['pc']))
    return refs


def scan_apk(apk_path: str):
    """Load an APK and collect what the hooks need to know about it.

    Returns:
        Dict with 'package', 'sdk_int' (effective target SDK) and 'references'
    """
    print(f"[*] Loading APK: {apk_path}")
    a, d, dx = AnalyzeAPK(apk_path)
    return {
        'package': a.get_package(),
        'sdk_int': a.get_effective_target_sdk_version(),
        'references': find_surface_references(dx),
    }


def attach_process(process_identity, sdk_int=None, rules=None):
    """Attach the rule table to one process on a fresh in-process host.

    Returns:
        (host, driver, report)
    """
    host = HookRegistry(sdk_int=sdk_int)
    driver = RegistrationDriver(host, rules=rules)
    driver.install()
    host.load_package(process_identity)
    return host, driver, driver.report(process_identity)


def create_device_objects():
    """Fresh framework objects for every hooked class, keyed by class name."""
    return {cls: create_mock_for_class(cls) for cls in sorted(HOOKED_CLASSES)}


def build_detection_calls(objects=None):
    """Calls an app makes to detect a mock location, with truthful results.

    Every real_call returns what an unhooked device running a mock location
    app would report, and acts on the given device objects.

    Returns:
        List of (signature, args, real_call)
    """
    if objects is None:
        objects = create_device_objects()
    loc = objects[surfaces.LOCATION]
    lm = objects[surfaces.LOCATION_MANAGER]
    wm = objects[surfaces.WIFI_MANAGER]
    tm = objects[surfaces.TELEPHONY_MANAGER]
    cr = objects["Landroid/content/ContentResolver;"]
    setting = hide_config.mock_setting_name

    def register_listener(listener):
        lm._gps_listeners.append(listener)
        return True

    return [
        (surfaces.IS_FROM_MOCK_PROVIDER.signature, [CallArg(loc)],
         lambda: loc.fields["mIsMock"]),
        (surfaces.IS_MOCK.signature, [CallArg(loc)],
         lambda: loc.fields["mIsMock"]),
        (surfaces.GET_EXTRAS.signature, [CallArg(loc)],
         lambda: loc._extras),
        (surfaces.GET_SCAN_RESULTS.signature, [CallArg(wm)],
         lambda: list(wm._scan_results)),
        (surfaces.GET_CELL_LOCATION.signature, [CallArg(tm)],
         lambda: create_cell_location()),
        (surfaces.GET_ALL_CELL_INFO.signature, [CallArg(tm)],
         lambda: list(tm._cells)),
        (surfaces.GET_NEIGHBORING_CELL_INFO.signature, [CallArg(tm)],
         lambda: list(tm._cells)),
        (surfaces.ADD_GPS_STATUS_LISTENER.signature, [CallArg(lm), CallArg("listener")],
         lambda: register_listener("listener")),
        (surfaces.REGISTER_GNSS_STATUS_CALLBACK.signature, [CallArg(lm), CallArg("callback")],
         lambda: register_listener("callback")),
        (surfaces.REGISTER_GNSS_STATUS_CALLBACK_HANDLER.signature,
         [CallArg(lm), CallArg("callback"), CallArg(None)],
         lambda: register_listener("callback")),
        (surfaces.SECURE_GET_STRING.signature, [CallArg(cr), CallArg(setting)],
         lambda: cr._secure_settings.get(setting)),
        (surfaces.SECURE_GET_STRING_FOR_USER.signature, [CallArg(cr), CallArg(setting), CallArg(0)],
         lambda: cr._secure_settings.get(setting)),
        (surfaces.GET_PROVIDERS.signature, [CallArg(lm), CallArg(True)],
         lambda: list(lm._providers)),
        (surfaces.GET_ALL_PROVIDERS.signature, [CallArg(lm)],
         lambda: provider_list(lm._providers)),
    ]


def simulate_detection(host, process_identity, objects=None):
    """Run the detection calls through the host as the given process.

    The 'real' column comes from a separate set of device objects, so
    computing it never registers listeners or touches the objects the
    hooked calls see. Calls to methods the platform does not have are skipped.

    Returns:
        List of {'signature', 'hook', 'real', 'seen', 'executed'} with formatted values
    """
    calls = build_detection_calls(objects)
    truth = build_detection_calls()

    results = []
    for (signature, args, real_call), (_, _, truthful_call) in zip(calls, truth):
        surface = surfaces.get_surface(signature)
        if surface is not None and not surface.available_on(host.sdk_int):
            debug_log(f"{signature} not on API {host.sdk_int}, not called")
            continue
        rule = get_rule(signature)
        real = format_value(truthful_call())
        call = host.invoke(process_identity, signature, args, real_call)
        results.append({
            'signature': signature,
            'hook': rule.name if rule is not None else None,
            'real': real,
            'seen': format_value(call.result),
            'executed': call.executed,
        })
    return results


def print_report(report: AttachReport):
    """Print the per-rule outcome of an attach."""
    if report.skipped:
        print(warn(f"[!] {report.process_identity!r} is whitelisted, nothing hooked"))
        return
    for r in report.results:
        line = f"    {outcome(r.outcome.value):<24} {r.rule.signature}"
        if r.error is not None:
            line += dim(f"  ({r.error})")
        print(line)
    print(f"\n[+] {len(report.bound)} bound, {len(report.unavailable)} unavailable, "
          f"{len(report.failed)} failed")


def main():
    argparser = argparse.ArgumentParser(description="Mock location hiding hooks - attach report")
    argparser.add_argument("target", help="Package name or path to APK file")
    argparser.add_argument("--sdk", type=int, default=None,
                          help="Platform API level (default: APK target SDK or config)")
    argparser.add_argument("-s", "--simulate", action="store_true",
                          help="Run the detection calls and show what the app sees")
    argparser.add_argument("-v", "--verbose", action="store_true",
                          help="Enable verbose output (show every bound hook)")
    argparser.add_argument("-d", "--debug", action="store_true",
                          help="Enable debug output (show skipped surfaces)")
    args = argparser.parse_args()

    set_verbose(args.verbose, args.debug)

    process_identity = args.target
    sdk_int = args.sdk

    if args.target.endswith(".apk"):
        if not os.path.isfile(args.target):
            print(error(f"[!] Error: APK not found: {args.target}"))
            sys.exit(1)
        scan = scan_apk(args.target)
        process_identity = scan['package']
        if sdk_int is None:
            sdk_int = scan['sdk_int']

        print(f"[*] Package: {process_identity}")
        if scan['references']:
            print(f"[+] {len(scan['references'])} call site(s) to intercepted surfaces:")
            for ref in scan['references']:
                print(info(f"    {ref['caller']} @ PC={ref['pc']}"))
                log(dim(f"        {ref['instr']}"))
        else:
            print("[*] No intercepted surfaces referenced directly")
        print()

    host, driver, report = attach_process(process_identity, sdk_int=sdk_int)

    print(header(f"[*] Attach {process_identity} on API {host.sdk_int}: "
                 f"{driver.state(process_identity).value}"))
    print_report(report)

    if args.simulate and not report.skipped:
        print()
        print("=" * 50)
        print(bold("SIMULATION:"))
        print("=" * 50)
        for r in simulate_detection(host, process_identity):
            print(header(f"  {r['signature']}") + dim(f"  [{r['hook']}]"))
            print(f"    real: {r['real']}")
            mark = "" if r['executed'] else dim("  (not executed)")
            print(success(f"    seen: {r['seen']}") + mark)

    print(f"\n[*] Done. {len(RULE_TABLE)} rule(s) in table.")


if __name__ == "__main__":
    main()
