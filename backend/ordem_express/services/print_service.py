# backend/ordem_express/services/print_service.py
"""
Servicio de impresión de órdenes de servicio.

Genera un documento HTML autocontenido (CSS en línea, sin recursos externos)
que el navegador abre en una ventana nueva y envía al diálogo de impresión.
Todos los valores de la OS se escapan antes de interpolarse.
"""

from datetime import datetime
from decimal import Decimal
from html import escape
from typing import Optional

from ordem_express.db.models.service_order_model import ServiceOrder
from ordem_express.services.status_badges import status_badge, payment_badge

NOT_INFORMED = "Não informado"

# Estilos del documento impreso. Los badges de estado reutilizan las mismas clases que la API.
PRINT_CSS = """
    body { font-family: Arial, sans-serif; margin: 40px; line-height: 1.6; color: #333; }
    .header { text-align: center; margin-bottom: 30px; border-bottom: 2px solid #333; padding-bottom: 20px; }
    .os-number { font-size: 24px; font-weight: bold; color: #2563eb; }
    .section { margin: 20px 0; padding: 15px; border: 1px solid #ddd; border-radius: 5px; }
    .section-title { font-weight: bold; font-size: 16px; margin-bottom: 10px; color: #2563eb; border-bottom: 1px solid #eee; padding-bottom: 5px; }
    .field { margin: 8px 0; }
    .field strong { min-width: 120px; display: inline-block; }
    .status { display: inline-block; padding: 4px 8px; border-radius: 4px; font-size: 12px; font-weight: bold; }
    .status-completed { background: #dcfce7; color: #166534; }
    .status-delivered { background: #dcfce7; color: #166534; }
    .status-pending { background: #fef3c7; color: #92400e; }
    .status-in-progress { background: #dbeafe; color: #1e40af; }
    .status-waiting { background: #fde68a; color: #b45309; }
    .status-outline { border: 1px solid #999; }
    .footer { margin-top: 40px; text-align: center; font-size: 12px; color: #666; }
"""


def _text(value: Optional[str]) -> str:
    """Valor escapado, o "Não informado" si está vacío."""
    if value is None or str(value).strip() == "":
        return NOT_INFORMED
    return escape(str(value))


def format_money(value) -> str:
    """R$ con dos decimales; sin valor (o cero) se imprime "Não informado"."""
    if value is None or Decimal(str(value)) == 0:
        return NOT_INFORMED
    return f"R$ {Decimal(str(value)):.2f}"


def format_date(value: Optional[datetime]) -> str:
    """Fecha en formato brasileño (dd/mm/aaaa)."""
    return value.strftime("%d/%m/%Y") if value else ""


def _field(label: str, value: str) -> str:
    return f'<div class="field"><strong>{label}:</strong> {value}</div>'


def _badge(badge) -> str:
    label, css_class = badge
    return f'<span class="status {css_class}">{escape(label)}</span>'


def render_service_order_html(order: ServiceOrder, printed_at: Optional[datetime] = None,
                              system_name: str = "Ordem Express") -> str:
    """
    Construye el documento de impresión de una OS.

    Requiere que cliente, equipo y técnico estén cargados en la orden.

    Args:
        order: OS con sus relaciones cargadas
        printed_at: Momento de impresión (por defecto, ahora)
        system_name: Nombre del sistema en el pie del documento

    Returns:
        Documento HTML completo
    """
    printed_at = printed_at or datetime.now()
    number = escape(order.short_number)
    client = order.client
    equipment = order.equipment
    technician = order.technician

    solution_section = ""
    if order.solution_description:
        solution_section = f"""
        <div class="section">
          <div class="section-title">SOLUÇÃO APLICADA</div>
          <div>{escape(order.solution_description)}</div>
        </div>"""

    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
  <meta charset="UTF-8">
  <title>Ordem de Serviço #{number}</title>
  <style>{PRINT_CSS}</style>
</head>
<body>
  <div class="header">
    <h1>ORDEM DE SERVIÇO</h1>
    <div class="os-number">#{number}</div>
  </div>

  <div class="section">
    <div class="section-title">DADOS DO CLIENTE</div>
    {_field("Nome", escape(client.name))}
    {_field("Telefone", _text(client.phone))}
    {_field("E-mail", _text(client.email))}
    {_field("Endereço", _text(client.address))}
  </div>

  <div class="section">
    <div class="section-title">DADOS DO EQUIPAMENTO</div>
    {_field("Tipo", escape(equipment.type))}
    {_field("Marca", _text(equipment.brand))}
    {_field("Modelo", _text(equipment.model))}
    {_field("Nº Série", _text(equipment.serial_number))}
  </div>

  <div class="section">
    <div class="section-title">DESCRIÇÃO DO PROBLEMA</div>
    <div>{escape(order.problem_description)}</div>
  </div>
{solution_section}
  <div class="section">
    <div class="section-title">INFORMAÇÕES DA OS</div>
    {_field("Status", _badge(status_badge(order.status)))}
    {_field("Pagamento", _badge(payment_badge(order.payment_status)))}
    {_field("Valor", format_money(order.value))}
    {_field("Técnico", _text(technician.name if technician else None))}
    {_field("Data Criação", format_date(order.created_at))}
  </div>

  <div class="footer">
    <p>Este documento foi gerado automaticamente pelo sistema {escape(system_name)}</p>
    <p>Data de impressão: {printed_at.strftime("%d/%m/%Y %H:%M:%S")}</p>
  </div>

  <script>
    window.onload = function() {{
      window.print();
      window.onafterprint = function() {{ window.close(); }};
    }};
  </script>
</body>
</html>
"""
