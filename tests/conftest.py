"""Shared C# class fixtures for SRP Insight tests."""

import pytest

PROCESS_CONTROLLER = """
using Api.Authorization;
using Application.Processes;
using Microsoft.AspNetCore.Mvc;

namespace Api.Controllers.Processes;

[ApiController]
[Route("api/process")]
public class ProcessController : ControllerBase
{
    private readonly IA _a;
    private readonly IB _b;
    private readonly IC _c;

    public ProcessController(
        IA a,
        IB b,
        IC c)
    {
        _a = a;
        _b = b;
        _c = c;
    }

    [HttpGet("workpieces/{machineNumber:int}")]
    public async Task<IReadOnlyCollection<WorkpieceModel>> GetWorkpieces([FromRoute] int machineNumber, CancellationToken token)
    {
        return await _a.GetWorkpieces(machineNumber, token);
    }
}
"""

PRIMARY_PROCESS_CONTROLLER = """
public class ProcessController(IA a, IB b, IC c) : ControllerBase
{
    private readonly IA _a = a;
    private readonly IB _b = b;
    private readonly IC _c = c;

    public async Task<IReadOnlyCollection<WorkpieceModel>> GetWorkpieces(int machineNumber, CancellationToken token)
    {
        return await _a.GetWorkpieces(machineNumber, token);
    }
}
"""

PROCESSOR = """
public class Processor
{
    private readonly IOrderService _orderService;
    private readonly IEmailService _emailService;

    public Processor(IOrderService orderService, IEmailService emailService)
    {
        _orderService = orderService;
        _emailService = emailService;
    }

    public void ProcessOrder(Order order)
    {
        _orderService.Process(order);
    }

    public void SendConfirmationEmail(Order order)
    {
        _emailService.SendEmail(order.CustomerEmail, "Your order has been processed.");
    }
}
"""

COHESIVE_CHECKOUT = """
public class Checkout
{
    private readonly ICart _cart;
    private readonly IPayments _payments;

    public Checkout(ICart cart, IPayments payments)
    {
        _cart = cart;
        _payments = payments;
    }

    public void Pay()
    {
        _payments.Charge(_cart.Total);
    }

    public decimal Preview() => _payments.Quote(_cart.Total);
}
"""

EXPRESSION_BODIED = """
public class Test
{
    private readonly IDep _dep;
    public Test(IDep dep) { _dep = dep; }

    public void Method1()
    {
        _dep.Do();
    }

    public int Method2() => 42;
}
"""


@pytest.fixture
def process_controller():
    """Conventional constructor, three dependencies, one used."""
    return PROCESS_CONTROLLER


@pytest.fixture
def primary_process_controller():
    """Primary constructor variant of process_controller."""
    return PRIMARY_PROCESS_CONTROLLER


@pytest.fixture
def processor():
    """Two dependencies, each with its own single-purpose method."""
    return PROCESSOR


@pytest.fixture
def cohesive_checkout():
    """Two dependencies always used together."""
    return COHESIVE_CHECKOUT


@pytest.fixture
def expression_bodied():
    return EXPRESSION_BODIED


@pytest.fixture
def mixed_processor():
    """Processor plus a method that couples both dependencies."""
    return PROCESSOR.rstrip().removesuffix("}") + """
    public void ProcessAndNotify(Order order)
    {
        _orderService.Process(order);
        _emailService.SendEmail(order.CustomerEmail, "Done");
    }
}
"""
